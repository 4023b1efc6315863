"""
Interactive canvas showing a nonogram grid with its clues.
Translates Tk mouse events into pointer-down / pointer-enter / pointer-up.
"""
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Optional, Tuple

from core import config
from core.clues import CluePair
from core.grid import Grid, grid_shape
from core.types import CellState, MouseButton
from render.grid_render import GridRenderer

class GridCanvas:
    """Scrollable canvas for painting cells by click and drag."""

    def __init__(self, parent: tk.Widget, width: int = 700, height: int = 600):
        """Initialize the grid canvas and its scrollbars inside `parent`."""
        self.canvas = tk.Canvas(parent, width=width, height=height, bg="white", highlightthickness=0)
        v_scroll = ttk.Scrollbar(parent, orient=tk.VERTICAL, command=self.canvas.yview)
        h_scroll = ttk.Scrollbar(parent, orient=tk.HORIZONTAL, command=self.canvas.xview)
        self.canvas.configure(yscrollcommand=v_scroll.set, xscrollcommand=h_scroll.set)

        v_scroll.pack(side=tk.RIGHT, fill=tk.Y)
        h_scroll.pack(side=tk.BOTTOM, fill=tk.X)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        # Grid and rendering
        self.grid: Grid = ()
        self.clues: Optional[CluePair] = None
        self.renderer = GridRenderer()
        self.colors: Dict[str, str] = config.THEMES[config.DEFAULT_THEME]

        # Drag state (widget side): cell the pointer was last seen over while a button is held
        self.button_held = False
        self.last_cell: Optional[Tuple[int, int]] = None

        # Callbacks
        self.on_pointer_down: Optional[Callable[[int, int, MouseButton], None]] = None
        self.on_pointer_enter: Optional[Callable[[int, int], None]] = None
        self.on_pointer_up: Optional[Callable[[], None]] = None
        self.position_callback: Optional[Callable] = None

        self._setup_event_bindings()

    def _setup_event_bindings(self):
        """Set up mouse event handlers."""
        self.canvas.bind("<ButtonPress-1>", lambda e: self._on_press(e, MouseButton.PRIMARY))
        self.canvas.bind("<ButtonPress-3>", lambda e: self._on_press(e, MouseButton.SECONDARY))
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<B3-Motion>", self._on_drag)
        self.canvas.bind("<Motion>", self._on_mouse_motion)
        self.canvas.bind("<MouseWheel>", self._on_mouse_wheel)
        self.canvas.bind("<Shift-MouseWheel>", self._on_mouse_wheel)

        # macOS reports the secondary button as button 2
        if self.canvas.tk.call("tk", "windowingsystem") == "aqua":
            self.canvas.bind("<ButtonPress-2>", lambda e: self._on_press(e, MouseButton.SECONDARY))
            self.canvas.bind("<B2-Motion>", self._on_drag)

        # A drag may end with the button released anywhere in the application
        for button in (1, 2, 3):
            self.canvas.bind_all(f"<ButtonRelease-{button}>", self._on_release, add="+")

    def set_callbacks(self, on_pointer_down: Callable, on_pointer_enter: Callable, on_pointer_up: Callable):
        self.on_pointer_down = on_pointer_down
        self.on_pointer_enter = on_pointer_enter
        self.on_pointer_up = on_pointer_up

    def set_position_callback(self, callback: Callable):
        """Set position update callback for status bar."""
        self.position_callback = callback

    def set_colors(self, colors: Dict[str, str]):
        """Theme colours used from the next redraw on."""
        self.colors = colors

    def set_grid(self, grid: Grid, clues: Optional[CluePair]):
        """Show a grid and the clues printed around it."""
        self.grid = grid
        self.clues = clues
        self.redraw_grid()

    def _cell_at(self, event) -> Optional[Tuple[int, int]]:
        if not self.grid:
            return None
        rows, cols = grid_shape(self.grid)
        # Event coordinates are window-relative; cells live in scrolled canvas space
        x, y = self.canvas.canvasx(event.x), self.canvas.canvasy(event.y)
        return self.renderer.pixel_to_cell(x, y, rows, cols)

    def _on_press(self, event, button: MouseButton):
        cell = self._cell_at(event)
        if cell is None:
            return
        self.canvas.focus_set()
        self.button_held = True
        self.last_cell = cell
        if self.on_pointer_down:
            self.on_pointer_down(cell[0], cell[1], button)

    def _on_drag(self, event):
        """Motion with a button held: report each newly entered cell."""
        self._update_position(event)
        if not self.button_held:
            return
        cell = self._cell_at(event)
        if cell == self.last_cell:
            return
        # Outside the grid last_cell becomes None, so re-entering any cell paints it
        if cell is None:
            self.last_cell = None
            return
        self.last_cell = cell
        if self.on_pointer_enter:
            self.on_pointer_enter(cell[0], cell[1])

    def _on_release(self, event=None):
        if not self.button_held:
            return
        self.button_held = False
        self.last_cell = None
        if self.on_pointer_up:
            self.on_pointer_up()

    def _on_mouse_motion(self, event):
        self._update_position(event)

    def _on_mouse_wheel(self, event):
        units = -1 if event.delta > 0 else 1
        if event.state & 0x0001:  # Shift
            self.canvas.xview_scroll(units, "units")
        else:
            self.canvas.yview_scroll(units, "units")

    def _update_position(self, event):
        if not self.position_callback:
            return
        cell = self._cell_at(event)
        if cell is not None:
            self.position_callback(*cell)
        else:
            self.position_callback()  # Clear position display

    def redraw_grid(self):
        """Completely redraw clues and cells."""
        self.canvas.delete("all")
        if not self.grid:
            return

        rows, cols = grid_shape(self.grid)
        if self.clues is not None:
            self.renderer.layout(self.clues.max_row_clues, self.clues.max_col_clues)
        else:
            self.renderer.layout(0, 0)

        width, height = self.renderer.total_size(rows, cols)
        self.canvas.config(scrollregion=(0, 0, width, height))

        # Clue area backgrounds
        ox, oy = self.renderer.grid_origin
        grid_w, grid_h = cols * self.renderer.cell_size, rows * self.renderer.cell_size
        self.canvas.create_rectangle(ox, self.renderer.offset, ox + grid_w, oy,
                                     fill=self.colors['panel_bg'], outline=self.colors['grid_border'])
        self.canvas.create_rectangle(self.renderer.offset, oy, ox, oy + grid_h,
                                     fill=self.colors['panel_bg'], outline=self.colors['grid_border'])

        if self.clues is not None:
            for row, clue in enumerate(self.clues.rows):
                self.renderer.draw_row_clue(self.canvas, row, clue)
            for col, clue in enumerate(self.clues.cols):
                self.renderer.draw_col_clue(self.canvas, col, clue)

        for row in range(rows):
            for col in range(cols):
                self.renderer.draw_cell(
                    self.canvas, row, col, CellState(self.grid[row][col]),
                    filled_color=self.colors['filled'],
                    marked_color=self.colors['marked'],
                )

        self.renderer.draw_guides(self.canvas, rows, cols)
