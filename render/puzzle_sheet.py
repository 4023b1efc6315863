# render/puzzle_sheet.py
#!/usr/bin/env python3
"""
Printable puzzle sheet renderer.
Draws a nonogram (clues plus blank grid, or the solution) with matplotlib
so a puzzle can be exported as PNG/PDF and solved on paper.
"""

import numpy as np
import matplotlib.patches as patches
from matplotlib.figure import Figure
from typing import Optional, Sequence

from core.puzzle import Puzzle
from core.types import CellState
from utils.sizes import subgrid_size


class PuzzleSheetRenderer:
    """
    Render a Puzzle onto a matplotlib axis.
    One cell is one data unit; clues sit left of and above the grid.
    """

    def __init__(self, clue_spacing: float = 0.9, padding: float = 0.5, text_weight: str = 'bold'):
        """
        Initialize the renderer.

        Args:
            clue_spacing: Distance between consecutive clue numbers, in cells
            padding: Padding around the sheet, in cells
            text_weight: Font weight for clue numbers ('normal' or 'bold')
        """
        self.spacing = float(clue_spacing)
        self.pad = float(padding)
        self.tw = text_weight

    def figure_size(self, puzzle: Puzzle, scale: float = 0.35):
        """Figure size in inches: grid plus clue areas, never below 4x4."""
        rows, cols = puzzle.dimensions
        width = (cols + puzzle.clues.max_row_clues * self.spacing) * scale
        height = (rows + puzzle.clues.max_col_clues * self.spacing) * scale
        return max(4.0, width), max(4.0, height)

    def _draw_cells(self, ax, grid: np.ndarray, show_solution: bool):
        """Fill solution cells (when requested) and draw the thin cell lines."""
        rows, cols = grid.shape
        if show_solution:
            for r, c in zip(*np.nonzero(grid == CellState.FILLED)):
                ax.add_patch(patches.Rectangle((c, r), 1, 1, facecolor='black', edgecolor='none'))

        for r in range(rows + 1):
            ax.plot([0, cols], [r, r], color='#999999', linewidth=0.6)
        for c in range(cols + 1):
            ax.plot([c, c], [0, rows], color='#999999', linewidth=0.6)

    def _draw_guides(self, ax, rows: int, cols: int):
        """Bold subgrid lines and outer frame."""
        step = subgrid_size(cols)
        for c in range(step, cols, step):
            ax.plot([c, c], [0, rows], color='black', linewidth=1.6)
        step = subgrid_size(rows)
        for r in range(step, rows, step):
            ax.plot([0, cols], [r, r], color='black', linewidth=1.6)

        ax.add_patch(patches.Rectangle((0, 0), cols, rows, fill=False, edgecolor='black', linewidth=2))

    def _draw_clues(self, ax, row_clues: Sequence[Sequence[int]], col_clues: Sequence[Sequence[int]], font_size: float):
        for r, clue in enumerate(row_clues):
            for i, number in enumerate(reversed(list(clue))):
                ax.text(-(i + 0.6) * self.spacing, r + 0.5, str(number),
                        ha='center', va='center', fontsize=font_size, fontweight=self.tw)

        for c, clue in enumerate(col_clues):
            for i, number in enumerate(reversed(list(clue))):
                ax.text(c + 0.5, -(i + 0.6) * self.spacing, str(number),
                        ha='center', va='center', fontsize=font_size, fontweight=self.tw)

    def render_puzzle(self, puzzle: Puzzle, ax=None, *, show_solution: bool = False,
                      title: Optional[str] = None) -> object:
        """
        Render a complete puzzle sheet.

        Args:
            puzzle: Puzzle to draw
            ax: Optional matplotlib axis (creates new figure if None)
            show_solution: Fill the answer cells instead of leaving the grid blank
            title: Heading above the sheet (puzzle name when None)

        Returns:
            Matplotlib axis object
        """
        grid = np.asarray(puzzle.grid, dtype=int)
        rows, cols = grid.shape

        max_row = puzzle.clues.max_row_clues * self.spacing
        max_col = puzzle.clues.max_col_clues * self.spacing

        if ax is None:
            fig = Figure(figsize=self.figure_size(puzzle))
            ax = fig.subplots()

        font_size = max(6, min(14, 120 / max(rows, cols, 1)))

        self._draw_cells(ax, grid, show_solution)
        self._draw_guides(ax, rows, cols)
        self._draw_clues(ax, puzzle.rows, puzzle.cols, font_size)

        ax.set_aspect('equal')
        ax.set_xlim(-max_row - self.pad, cols + self.pad)
        ax.set_ylim(rows + self.pad, -max_col - self.pad)  # Invert Y so row 0 is on top
        ax.axis('off')
        ax.set_title(puzzle.name if title is None else title, fontsize=14, pad=10)

        return ax


def save_puzzle_sheet(puzzle: Puzzle, path: str, show_solution: bool = False, dpi: int = 150) -> str:
    """
    Render a puzzle to an image or PDF file (format taken from the extension).

    Returns:
        The path written
    """
    renderer = PuzzleSheetRenderer()
    ax = renderer.render_puzzle(puzzle, show_solution=show_solution)
    fig = ax.figure
    fig.tight_layout()
    fig.savefig(path, dpi=dpi)
    return path
