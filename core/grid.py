"""
Grid value helpers for Griddler.

A Grid is an immutable tuple of row tuples holding CellState values.
Every mutation builds a new Grid, so a grid handed to a widget or stored
in a Puzzle can never change underneath its owner.
"""
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from core.types import CellState, ShapeError

Grid = Tuple[Tuple[int, ...], ...]

AUTHORED_VALUES = frozenset({CellState.EMPTY, CellState.FILLED})
SOLVE_VALUES = frozenset({CellState.EMPTY, CellState.FILLED, CellState.MARKED})


def create_empty_grid(rows: int, cols: Optional[int] = None) -> Grid:
    """
    Build an all-EMPTY grid.

    Args:
        rows: Number of rows
        cols: Number of columns (defaults to rows for a square grid)

    Returns:
        New Grid of the requested shape
    """
    if cols is None:
        cols = rows
    if rows < 0 or cols < 0:
        raise ValueError(f"Grid dimensions must not be negative: {rows}x{cols}")
    return tuple(tuple(CellState.EMPTY for _ in range(cols)) for _ in range(rows))


def grid_shape(grid: Sequence[Sequence[Any]]) -> Tuple[int, int]:
    """
    Return (rows, cols) of a rectangular grid.

    Raises:
        ShapeError: If rows have different lengths
    """
    rows = len(grid)
    if rows == 0:
        return 0, 0
    cols = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != cols:
            raise ShapeError(f"Row {index} has {len(row)} cells, expected {cols}")
    return rows, cols


def freeze_grid(data: Iterable[Iterable[Any]], allowed: Iterable[CellState] = SOLVE_VALUES) -> Grid:
    """
    Convert nested sequences (e.g. parsed JSON) into a Grid.

    Args:
        data: Row-major nested sequences of cell values
        allowed: Cell values accepted in this grid

    Returns:
        Validated immutable Grid

    Raises:
        ShapeError: If the rows differ in length
        ValueError: If a cell holds a value outside `allowed`
    """
    allowed = frozenset(allowed)
    frozen: List[Tuple[int, ...]] = []
    for r, row in enumerate(data):
        cells = []
        for c, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int) or value not in allowed:
                raise ValueError(f"Invalid cell value {value!r} at ({r}, {c})")
            cells.append(CellState(value))
        frozen.append(tuple(cells))
    grid = tuple(frozen)
    grid_shape(grid)
    return grid


def thaw_grid(grid: Grid) -> List[List[int]]:
    """JSON-ready nested list copy of a grid."""
    return [[int(value) for value in row] for row in grid]


def get_cell(grid: Grid, row: int, col: int) -> CellState:
    assert 0 <= row < len(grid), f"row {row} out of range [0, {len(grid)})"
    assert 0 <= col < len(grid[row]), f"col {col} out of range [0, {len(grid[row])})"
    return CellState(grid[row][col])


def set_cell(grid: Grid, row: int, col: int, value: CellState) -> Grid:
    """
    Return a new grid with one cell replaced.

    Untouched rows are shared with the old grid; they are tuples, so the
    sharing is never observable.
    """
    assert 0 <= row < len(grid), f"row {row} out of range [0, {len(grid)})"
    assert 0 <= col < len(grid[row]), f"col {col} out of range [0, {len(grid[row])})"

    old_row = grid[row]
    new_row = old_row[:col] + (CellState(value),) + old_row[col + 1:]
    return grid[:row] + (new_row,) + grid[row + 1:]


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for value in row if value == CellState.FILLED)
