"""
Application state for Griddler and the pure transitions between states.

The GUI keeps exactly one AppState and replaces it with the result of a
transition on every user action; nothing here touches Tk, files or clocks.

Ownership:
    - `puzzles` is the sole owner of all Puzzle records.
    - `solve_grid` is an ephemeral copy owned by the solving session and is
      reset whenever the selected puzzle or the tab changes.
"""
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from core import config
from core.checker import check_solution
from core.grid import Grid, create_empty_grid, grid_shape
from core.interaction import IDLE, Dragging, DragState, on_pointer_down, on_pointer_enter, on_pointer_up
from core.puzzle import Puzzle, PuzzleId
from core.types import Mode, MouseButton

MSG_SOLVED = "Congratulations! You solved the puzzle correctly!"
MSG_NOT_SOLVED = "Sorry, that solution is not correct. Please try again."
MSG_SAVED = "Puzzle saved successfully!"
MSG_NO_NEW_PUZZLES = "No new puzzles were imported. They may be duplicates of existing puzzles."


@dataclass(frozen=True)
class CreatorState:
    """Puzzle being authored in the Create tab."""
    size: int = config.DEFAULT_GRID_SIZE
    grid: Grid = field(default_factory=lambda: create_empty_grid(config.DEFAULT_GRID_SIZE))
    name: str = config.DEFAULT_PUZZLE_NAME
    editing_id: Optional[PuzzleId] = None

    @property
    def edit_mode(self) -> bool:
        """True while an existing puzzle is being edited."""
        return self.editing_id is not None


@dataclass(frozen=True)
class AppState:
    puzzles: Tuple[Puzzle, ...] = ()
    selected_id: Optional[PuzzleId] = None
    active_tab: Mode = Mode.SOLVE
    solve_grid: Grid = ()
    creator: CreatorState = field(default_factory=CreatorState)
    drag: DragState = IDLE
    theme: str = config.DEFAULT_THEME
    message: str = ""
    message_is_error: bool = False

    @property
    def selected_puzzle(self) -> Optional[Puzzle]:
        return find_puzzle(self.puzzles, self.selected_id)

    @property
    def active_grid(self) -> Grid:
        """Grid receiving pointer input in the current tab."""
        return self.solve_grid if self.active_tab == Mode.SOLVE else self.creator.grid

    def puzzle_ids(self) -> Tuple[PuzzleId, ...]:
        return tuple(p.id for p in self.puzzles)


def find_puzzle(puzzles: Iterable[Puzzle], puzzle_id: Optional[PuzzleId]) -> Optional[Puzzle]:
    if puzzle_id is None:
        return None
    for puzzle in puzzles:
        if puzzle.id == puzzle_id:
            return puzzle
    return None


def _fresh_solve_grid(puzzle: Optional[Puzzle]) -> Grid:
    if puzzle is None:
        return ()
    return create_empty_grid(*grid_shape(puzzle.grid))


def _fresh_creator(size: int) -> CreatorState:
    return CreatorState(size=size, grid=create_empty_grid(size))


# =============================================================================
# COLLECTION
# =============================================================================

def _unique_ids(puzzles: Iterable[Puzzle]) -> Tuple[Puzzle, ...]:
    """
    Tuple of the given puzzles, checked for repeated ids.

    Raises:
        ValueError: If two puzzles share an id
    """
    puzzles = tuple(puzzles)
    seen = set()
    for puzzle in puzzles:
        if puzzle.id in seen:
            raise ValueError(f"Duplicate puzzle id {puzzle.id!r}")
        seen.add(puzzle.id)
    return puzzles


def load_puzzles(state: AppState, puzzles: Iterable[Puzzle]) -> AppState:
    """
    Replace the collection; keep the selection if it survived, else pick the first puzzle.

    Raises:
        ValueError: If two puzzles share an id
    """
    puzzles = _unique_ids(puzzles)
    selected = find_puzzle(puzzles, state.selected_id)
    if selected is None and puzzles:
        selected = puzzles[0]
    return replace(
        state,
        puzzles=puzzles,
        selected_id=selected.id if selected else None,
        solve_grid=_fresh_solve_grid(selected),
        drag=IDLE,
    )


def restore_puzzles(state: AppState, restored: Iterable[Puzzle]) -> AppState:
    """
    Replace the whole collection from a backup and select its first puzzle.

    Raises:
        ValueError: If two puzzles share an id
    """
    restored = _unique_ids(restored)
    if not restored:
        return state
    first = restored[0]
    return replace(
        state,
        puzzles=restored,
        selected_id=first.id,
        solve_grid=_fresh_solve_grid(first),
        drag=IDLE,
        message=f"Restored {len(restored)} puzzles successfully!",
        message_is_error=False,
    )


def import_puzzles(state: AppState, imported: Iterable[Puzzle]) -> Tuple[AppState, int]:
    """
    Append imported puzzles whose id is not in the collection yet.

    Puzzles with an existing id are skipped silently (no merge).

    Returns:
        (new state, number of puzzles added)
    """
    known = set(state.puzzle_ids())
    added = []
    for puzzle in imported:
        if puzzle.id in known:
            continue
        known.add(puzzle.id)
        added.append(puzzle)

    if not added:
        return replace(state, message=MSG_NO_NEW_PUZZLES, message_is_error=True), 0

    new_state = replace(
        state,
        puzzles=state.puzzles + tuple(added),
        message=f"Imported {len(added)} new puzzles successfully!",
        message_is_error=False,
    )
    if new_state.selected_id is None:
        new_state = replace(new_state, selected_id=added[0].id, solve_grid=_fresh_solve_grid(added[0]))
    return new_state, len(added)


def select_puzzle(state: AppState, puzzle_id: PuzzleId) -> AppState:
    """
    Select a puzzle from the sidebar.

    Solve tab: start an empty solve grid of the puzzle's size.
    Create tab: load the puzzle into the creator for editing.
    """
    puzzle = find_puzzle(state.puzzles, puzzle_id)
    if puzzle is None:
        raise KeyError(f"No puzzle with id {puzzle_id!r}")

    if state.active_tab == Mode.SOLVE:
        return replace(
            state,
            selected_id=puzzle.id,
            solve_grid=_fresh_solve_grid(puzzle),
            drag=IDLE,
            message="",
            message_is_error=False,
        )

    rows, _ = grid_shape(puzzle.grid)
    creator = CreatorState(size=rows, grid=puzzle.grid, name=puzzle.name, editing_id=puzzle.id)
    return replace(state, selected_id=puzzle.id, creator=creator, drag=IDLE)


def switch_tab(state: AppState, mode: Mode) -> AppState:
    """Change tab; the solve grid or the creator starts over."""
    if mode == Mode.SOLVE:
        return replace(
            state,
            active_tab=mode,
            solve_grid=_fresh_solve_grid(state.selected_puzzle),
            drag=IDLE,
        )
    return replace(state, active_tab=mode, creator=_fresh_creator(state.creator.size), drag=IDLE)


# =============================================================================
# POINTER INPUT (routes the paint interaction model to the active grid)
# =============================================================================

def _with_active_grid(state: AppState, grid: Grid, drag: DragState) -> AppState:
    if state.active_tab == Mode.SOLVE:
        return replace(state, solve_grid=grid, drag=drag)
    return replace(state, creator=replace(state.creator, grid=grid), drag=drag)


def pointer_down(state: AppState, row: int, col: int, button: MouseButton) -> AppState:
    grid, paint_value = on_pointer_down(state.active_grid, row, col, button, state.active_tab)
    return _with_active_grid(state, grid, Dragging(paint_value))


def pointer_enter(state: AppState, row: int, col: int) -> AppState:
    if not isinstance(state.drag, Dragging):
        return state
    grid = on_pointer_enter(state.active_grid, row, col, state.drag)
    if grid is state.active_grid:
        return state
    return _with_active_grid(state, grid, state.drag)


def pointer_up(state: AppState) -> AppState:
    if not isinstance(state.drag, Dragging):
        return state
    return replace(state, drag=on_pointer_up())


# =============================================================================
# SOLVING
# =============================================================================

def is_solved(state: AppState) -> bool:
    puzzle = state.selected_puzzle
    return puzzle is not None and check_solution(state.solve_grid, puzzle.grid)


def submit_solution(state: AppState) -> AppState:
    if state.selected_puzzle is None:
        return state
    solved = is_solved(state)
    return replace(state, message=MSG_SOLVED if solved else MSG_NOT_SOLVED, message_is_error=not solved)


# =============================================================================
# CREATOR
# =============================================================================

def set_creator_name(state: AppState, name: str) -> AppState:
    return replace(state, creator=replace(state.creator, name=name))


def change_creator_size(state: AppState, size: int) -> AppState:
    """Start a blank puzzle of another size; leaves edit mode."""
    if size not in config.GRID_SIZES:
        raise ValueError(f"Unsupported grid size {size}; choose one of {config.GRID_SIZES}")
    return replace(state, creator=_fresh_creator(size), drag=IDLE)


def new_creator_puzzle(state: AppState) -> AppState:
    return replace(state, creator=_fresh_creator(state.creator.size), drag=IDLE)


def save_creator_puzzle(state: AppState, puzzle_id: Optional[PuzzleId] = None) -> AppState:
    """
    Save the creator grid.

    In edit mode the edited puzzle is replaced in place (same id, same
    position); otherwise a new puzzle is appended. Either way it becomes
    the selected puzzle and the creator leaves edit mode.

    Args:
        puzzle_id: Id for a new puzzle (a timestamp id when omitted)
    """
    creator = state.creator
    existing = find_puzzle(state.puzzles, creator.editing_id)

    if existing is not None:
        saved = existing.with_grid(creator.grid, name=creator.name)
        puzzles = tuple(saved if p.id == saved.id else p for p in state.puzzles)
    else:
        if puzzle_id is not None and puzzle_id in state.puzzle_ids():
            raise ValueError(f"Puzzle id {puzzle_id!r} already exists")
        saved = Puzzle.create(creator.name, creator.grid, puzzle_id=puzzle_id)
        # Timestamp ids can collide when saving twice within a millisecond
        while saved.id in state.puzzle_ids():
            saved = replace(saved, id=saved.id + 1)
        puzzles = state.puzzles + (saved,)

    return replace(
        state,
        puzzles=puzzles,
        selected_id=saved.id,
        creator=replace(creator, editing_id=None),
        message=MSG_SAVED,
        message_is_error=False,
    )


# =============================================================================
# PRESENTATION
# =============================================================================

def set_theme(state: AppState, theme: str) -> AppState:
    if theme not in config.THEMES:
        raise ValueError(f"Unknown theme {theme!r}")
    return replace(state, theme=theme)


def set_message(state: AppState, message: str, is_error: bool = False) -> AppState:
    return replace(state, message=message, message_is_error=is_error)


def clear_message(state: AppState) -> AppState:
    return replace(state, message="", message_is_error=False)
