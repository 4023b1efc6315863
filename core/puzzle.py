"""
Puzzle - authoritative nonogram record for Griddler.

A Puzzle owns an answer grid (FILLED/EMPTY only) plus the row and column
clues derived from it. Clues are cached on the record but always recomputed
when the grid changes, so `rows`/`cols` never drift from the answer.

JSON layout (one element of a puzzle collection):

    {"id": 1700000000000, "name": "Heart", "size": "10x10",
     "grid": [[0, 1, ...], ...], "rows": [[2, 2], ...], "cols": [[3], ...]}
"""
import logging
import time
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from core.clues import Clue, CluePair, compute_clues
from core.grid import AUTHORED_VALUES, Grid, count_filled, freeze_grid, grid_shape, thaw_grid
from core.types import PuzzleFormatError, ShapeError, ValidationError
from utils.sizes import size_to_string

logger = logging.getLogger(__name__)

PuzzleId = Union[int, str]

REQUIRED_FIELDS = ("id", "name", "grid")


def new_puzzle_id() -> int:
    """Millisecond timestamp id, matching ids in existing collections."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Puzzle:
    """
    Immutable puzzle record.

    Attributes:
        id: Unique identifier within a collection
        name: Display name
        size: "RxC" descriptor ("NxN" for square puzzles)
        grid: Answer grid, FILLED/EMPTY only
        rows: Row clues derived from grid
        cols: Column clues derived from grid
    """
    id: PuzzleId
    name: str
    size: str
    grid: Grid
    rows: Tuple[Clue, ...]
    cols: Tuple[Clue, ...]

    # =============================================================================
    # CONSTRUCTION
    # =============================================================================

    @classmethod
    def create(cls, name: str, grid: Any, puzzle_id: Optional[PuzzleId] = None) -> 'Puzzle':
        """
        Build a puzzle from an answer grid, deriving size and clues.

        Args:
            name: Display name
            grid: Nested sequences of 0/1 values
            puzzle_id: Identifier (a fresh timestamp id when omitted)

        Raises:
            ShapeError: If the grid is not rectangular
            ValueError: If the grid holds anything but FILLED/EMPTY
        """
        frozen = freeze_grid(grid, allowed=AUTHORED_VALUES)
        rows, cols = grid_shape(frozen)
        if rows == 0 or cols == 0:
            raise ValueError("Puzzle grid must have at least one cell")
        clues = compute_clues(frozen)
        return cls(
            id=new_puzzle_id() if puzzle_id is None else puzzle_id,
            name=name,
            size=size_to_string(rows, cols),
            grid=frozen,
            rows=clues.rows,
            cols=clues.cols,
        )

    def with_grid(self, grid: Any, name: Optional[str] = None) -> 'Puzzle':
        """Copy of this puzzle with a new answer grid (clues recomputed)."""
        return Puzzle.create(self.name if name is None else name, grid, puzzle_id=self.id)

    def renamed(self, name: str) -> 'Puzzle':
        return replace(self, name=name)

    # =============================================================================
    # QUERIES
    # =============================================================================

    @property
    def clues(self) -> CluePair:
        return CluePair(rows=self.rows, cols=self.cols)

    @property
    def dimensions(self) -> Tuple[int, int]:
        return grid_shape(self.grid)

    def get_statistics(self) -> Dict[str, Any]:
        """Summary numbers shown in the status bar and import reports."""
        rows, cols = self.dimensions
        filled = count_filled(self.grid)
        total = rows * cols
        return {
            "rows": rows,
            "cols": cols,
            "filled_cells": filled,
            "empty_cells": total - filled,
            "density": (filled / total) if total else 0.0,
            "max_row_clues": self.clues.max_row_clues,
            "max_col_clues": self.clues.max_col_clues,
        }

    # =============================================================================
    # SERIALIZATION
    # =============================================================================

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "grid": thaw_grid(self.grid),
            "rows": [list(clue) for clue in self.rows],
            "cols": [list(clue) for clue in self.cols],
        }

    @classmethod
    def from_json(cls, json_data: Dict[str, Any]) -> 'Puzzle':
        """
        Load a puzzle record from parsed JSON.

        The stored size and clues are advisory: both are recomputed from the
        grid, and a disagreement is logged rather than trusted.

        Raises:
            PuzzleFormatError: If fields are missing or the grid is invalid
        """
        if not isinstance(json_data, dict):
            raise PuzzleFormatError(f"Puzzle entry must be an object, got {type(json_data).__name__}")

        missing = [key for key in REQUIRED_FIELDS if key not in json_data]
        if missing:
            raise PuzzleFormatError(f"Puzzle entry is missing field(s): {', '.join(missing)}")

        puzzle_id = json_data["id"]
        if isinstance(puzzle_id, bool) or not isinstance(puzzle_id, (int, str)):
            raise PuzzleFormatError(f"Puzzle id must be a number or string, got {puzzle_id!r}")

        name = json_data["name"]
        if not isinstance(name, str):
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: name must be a string")

        raw_grid = json_data["grid"]
        if not isinstance(raw_grid, list) or not all(isinstance(row, list) for row in raw_grid):
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: grid must be a list of lists")

        try:
            puzzle = cls.create(name, raw_grid, puzzle_id=puzzle_id)
        except ShapeError as e:
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: grid is not rectangular ({e})") from e
        except ValueError as e:
            raise PuzzleFormatError(f"Puzzle {puzzle_id}: {e}") from e

        stored = {key: json_data.get(key) for key in ("rows", "cols")}
        computed = puzzle.clues.to_dict()
        if any(stored[key] is not None and stored[key] != computed[key] for key in stored):
            logger.warning("Puzzle %s: stored clues disagree with grid, using recomputed clues", puzzle_id)

        stored_size = json_data.get("size")
        if stored_size is not None and stored_size != puzzle.size:
            logger.warning("Puzzle %s: stored size %r does not match grid %s", puzzle_id, stored_size, puzzle.size)

        return puzzle


# =============================================================================
# CREATOR VALIDATION
# =============================================================================

def validate_creator_grid(grid: Grid) -> List[ValidationError]:
    """
    Return a list[ValidationError] describing a grid being authored.
    Empty list == nothing to report. Issues never block saving.
    """
    issues: List[ValidationError] = []

    if count_filled(grid) == 0:
        issues.append(ValidationError("warning", "Grid has no filled cells"))
        return issues

    clues = compute_clues(grid)
    for index, clue in enumerate(clues.rows):
        if clue == (0,):
            issues.append(ValidationError("info", f"Row {index + 1} is empty", location=(index, 0)))
    for index, clue in enumerate(clues.cols):
        if clue == (0,):
            issues.append(ValidationError("info", f"Column {index + 1} is empty", location=(0, index)))

    return issues
