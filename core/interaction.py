"""
Paint interaction model for click-to-toggle and drag-to-paint.

The drag state is an explicit variant, Idle or Dragging(paint_value),
threaded through the pointer handlers. Pointer-down toggles the cell under
the pointer and remembers the resulting value; every cell entered while the
button is held is overwritten with that value. A drag that starts by
clearing a filled cell therefore erases every cell it crosses.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from core.grid import Grid, get_cell, set_cell
from core.types import CellState, Mode, MouseButton


@dataclass(frozen=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True)
class Dragging:
    """A button is held; entered cells receive paint_value."""
    paint_value: CellState


DragState = Union[Idle, Dragging]

IDLE = Idle()


def toggle_value(current: CellState, button: MouseButton, mode: Mode) -> CellState:
    """
    New value of a cell clicked with `button` in `mode`.

    Solve mode:
        PRIMARY:   FILLED -> EMPTY, anything else -> FILLED
        SECONDARY: MARKED -> EMPTY, anything else -> MARKED
    Create mode (any button):
        FILLED -> EMPTY, anything else -> FILLED
    """
    if mode == Mode.SOLVE and button == MouseButton.SECONDARY:
        return CellState.EMPTY if current == CellState.MARKED else CellState.MARKED
    return CellState.EMPTY if current == CellState.FILLED else CellState.FILLED


def on_pointer_down(grid: Grid, row: int, col: int,
                    button: MouseButton, mode: Mode) -> Tuple[Grid, CellState]:
    """
    Toggle the pressed cell.

    Returns:
        (new grid, paint value for the drag that starts here)
    """
    new_value = toggle_value(get_cell(grid, row, col), button, mode)
    return set_cell(grid, row, col, new_value), new_value


def on_pointer_enter(grid: Grid, row: int, col: int, drag_state: DragState) -> Grid:
    """Paint an entered cell while dragging; no-op when idle."""
    if not isinstance(drag_state, Dragging):
        return grid
    if get_cell(grid, row, col) == drag_state.paint_value:
        return grid
    return set_cell(grid, row, col, drag_state.paint_value)


def on_pointer_up() -> Idle:
    return IDLE

