"""
Square grid rendering utilities for Tkinter Canvas.
Lays out the clue areas (left of and above the grid) and the cells themselves.
"""
from typing import List, Optional, Sequence, Tuple
import tkinter as tk

from core import config
from core.types import CellState
from utils.sizes import subgrid_size

class GridRenderer:
    """Handles cell geometry and drawing for a nonogram grid with its clues."""

    def __init__(self, cell_size: float = config.CANVAS_CONFIG['cell_size'],
                 clue_size: float = config.CANVAS_CONFIG['clue_size']):
        """
        Initialize grid renderer.

        Args:
            cell_size: Side length of one grid cell
            clue_size: Room reserved per clue number in the clue areas
        """
        self.cell_size = cell_size
        self.clue_size = clue_size
        self.base_clue_count = config.CANVAS_CONFIG['base_clue_count']
        self.offset = config.CANVAS_CONFIG['offset']

        # Clue area sizes, updated by layout()
        self.left_width = self.clue_area_size(0)
        self.top_height = self.clue_area_size(0)

    def clue_area_size(self, max_clues: int) -> float:
        """
        Depth of a clue area holding up to `max_clues` numbers per line.

        Room for base_clue_count numbers is always reserved; longer clues
        widen the area by one full slot per extra number.
        """
        return max(self.base_clue_count, max_clues) * self.clue_size

    def layout(self, max_row_clues: int, max_col_clues: int) -> None:
        """Size the clue areas for the clues about to be drawn."""
        self.left_width = self.clue_area_size(max_row_clues)
        self.top_height = self.clue_area_size(max_col_clues)

    @property
    def grid_origin(self) -> Tuple[float, float]:
        """Pixel position of the top-left corner of cell (0, 0)."""
        return self.offset + self.left_width, self.offset + self.top_height

    def cell_to_pixel(self, row: int, col: int) -> Tuple[float, float, float, float]:
        """
        Bounding box of a cell.

        Returns:
            (x1, y1, x2, y2) canvas coordinates
        """
        ox, oy = self.grid_origin
        x1 = ox + col * self.cell_size
        y1 = oy + row * self.cell_size
        return x1, y1, x1 + self.cell_size, y1 + self.cell_size

    def pixel_to_cell(self, pixel_x: float, pixel_y: float, rows: int, cols: int) -> Optional[Tuple[int, int]]:
        """
        Cell under a canvas point, or None when the point is outside the grid.
        Used for mouse hit testing.
        """
        ox, oy = self.grid_origin
        if pixel_x < ox or pixel_y < oy:
            return None
        col = int((pixel_x - ox) // self.cell_size)
        row = int((pixel_y - oy) // self.cell_size)
        if 0 <= row < rows and 0 <= col < cols:
            return row, col
        return None

    def total_size(self, rows: int, cols: int) -> Tuple[float, float]:
        """Canvas width and height needed for the whole drawing."""
        ox, oy = self.grid_origin
        return ox + cols * self.cell_size + self.offset, oy + rows * self.cell_size + self.offset

    def draw_cell(self, canvas: tk.Canvas, row: int, col: int, value: CellState,
                  filled_color: str = "black", marked_color: str = "#fca5a5",
                  outline_color: str = "#999999") -> int:
        """
        Draw a single cell.

        Marked cells get a light fill and a small cross.

        Returns:
            Canvas item ID of the cell rectangle
        """
        x1, y1, x2, y2 = self.cell_to_pixel(row, col)
        if value == CellState.FILLED:
            fill = filled_color
        elif value == CellState.MARKED:
            fill = marked_color
        else:
            fill = "white"

        item_id = canvas.create_rectangle(x1, y1, x2, y2, fill=fill, outline=outline_color, width=1)

        if value == CellState.MARKED:
            pad = self.cell_size * 0.3
            canvas.create_line(x1 + pad, y1 + pad, x2 - pad, y2 - pad, fill="#b91c1c", width=2)
            canvas.create_line(x1 + pad, y2 - pad, x2 - pad, y1 + pad, fill="#b91c1c", width=2)

        return item_id

    def draw_guides(self, canvas: tk.Canvas, rows: int, cols: int) -> None:
        """Bold lines every few cells and a bold outer border."""
        ox, oy = self.grid_origin
        width = cols * self.cell_size
        height = rows * self.cell_size

        step = subgrid_size(cols)
        for col in range(step, cols, step):
            x = ox + col * self.cell_size
            canvas.create_line(x, oy, x, oy + height, fill="black", width=2)

        step = subgrid_size(rows)
        for row in range(step, rows, step):
            y = oy + row * self.cell_size
            canvas.create_line(ox, y, ox + width, y, fill="black", width=2)

        canvas.create_rectangle(ox, oy, ox + width, oy + height, outline="black", width=2)

    def draw_row_clue(self, canvas: tk.Canvas, row: int, clue: Sequence[int]) -> List[int]:
        """Draw a row clue right-aligned against the grid."""
        ox, _ = self.grid_origin
        _, y1, _, y2 = self.cell_to_pixel(row, 0)
        cy = (y1 + y2) / 2
        items = []
        for index, number in enumerate(reversed(list(clue))):
            cx = ox - (index + 0.5) * self.clue_size
            items.append(canvas.create_text(cx, cy, text=str(number), font=("Arial", 10, "bold"), fill="black"))
        return items

    def draw_col_clue(self, canvas: tk.Canvas, col: int, clue: Sequence[int]) -> List[int]:
        """Draw a column clue bottom-aligned against the grid."""
        _, oy = self.grid_origin
        x1, _, x2, _ = self.cell_to_pixel(0, col)
        cx = (x1 + x2) / 2
        items = []
        for index, number in enumerate(reversed(list(clue))):
            cy = oy - (index + 0.5) * self.clue_size
            items.append(canvas.create_text(cx, cy, text=str(number), font=("Arial", 10, "bold"), fill="black"))
        return items
