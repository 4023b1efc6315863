"""
Clue engine: derive row and column run-length clues from a grid.
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from core.grid import grid_shape
from core.types import CellState

Clue = Tuple[int, ...]

EMPTY_LINE_CLUE: Clue = (0,)


@dataclass(frozen=True)
class CluePair:
    """Row clues (top to bottom) and column clues (left to right)."""
    rows: Tuple[Clue, ...]
    cols: Tuple[Clue, ...]

    @property
    def max_row_clues(self) -> int:
        """Longest row clue, used to size the clue area left of the grid."""
        return max((len(clue) for clue in self.rows), default=0)

    @property
    def max_col_clues(self) -> int:
        """Longest column clue, used to size the clue area above the grid."""
        return max((len(clue) for clue in self.cols), default=0)

    def to_dict(self) -> Dict[str, List[List[int]]]:
        return {
            "rows": [list(clue) for clue in self.rows],
            "cols": [list(clue) for clue in self.cols],
        }


def line_clue(line: Sequence[int]) -> Clue:
    """
    Lengths of the maximal runs of FILLED cells in one row or column.

    MARKED and EMPTY both end a run. A line without FILLED cells gives (0,)
    so every line owns at least one clue slot.
    """
    runs = []
    count = 0
    for value in line:
        if value == CellState.FILLED:
            count += 1
        elif count > 0:
            runs.append(count)
            count = 0
    if count > 0:
        runs.append(count)
    return tuple(runs) if runs else EMPTY_LINE_CLUE


def compute_clues(grid: Sequence[Sequence[int]]) -> CluePair:
    """
    Compute row and column clues for a rectangular grid.

    Args:
        grid: Row-major cell values

    Returns:
        CluePair with one clue per row and one per column

    Raises:
        ShapeError: If the grid is not rectangular
    """
    rows, cols = grid_shape(grid)
    row_clues = tuple(line_clue(row) for row in grid)
    col_clues = tuple(line_clue([grid[r][c] for r in range(rows)]) for c in range(cols))
    return CluePair(rows=row_clues, cols=col_clues)
