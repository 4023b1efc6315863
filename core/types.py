"""
Shared types for Griddler.
Separated to avoid circular imports between modules.
"""
from enum import Enum, IntEnum
from typing import Optional, Tuple

class CellState(IntEnum):
    """Possible states for grid cells. Values are the JSON wire values."""
    EMPTY = 0    # Default, nothing painted
    FILLED = 1   # Painted black
    MARKED = 2   # Solver annotation: known not filled

class Mode(Enum):
    """Interaction mode, also the identifier of the active tab."""
    SOLVE = "solve"
    CREATE = "create"

class MouseButton(Enum):
    """Pointer button that started a gesture."""
    PRIMARY = "primary"
    SECONDARY = "secondary"

class ShapeError(ValueError):
    """Raised when a grid is not rectangular."""

class PuzzleFormatError(ValueError):
    """Raised for malformed persisted or imported puzzle data."""

class ValidationError:
    """Represents a validation issue with severity and description."""
    def __init__(self, severity: str, message: str, location: Optional[Tuple[int, int]] = None):
        self.severity = severity  # "error", "warning", "info"
        self.message = message
        self.location = location

    def __str__(self):
        loc_str = f" at {self.location}" if self.location else ""
        return f"{self.severity.upper()}: {self.message}{loc_str}"
