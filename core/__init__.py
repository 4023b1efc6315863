"""
Griddler - Core Package
Clue engine, paint interaction model, puzzle records, application state and persistence.
"""
from .types import CellState, Mode, MouseButton, ShapeError, PuzzleFormatError, ValidationError
from .clues import CluePair, compute_clues
from .checker import check_solution
from .interaction import Idle, Dragging, on_pointer_down, on_pointer_enter, on_pointer_up
from .puzzle import Puzzle
from .storage import PuzzleStore

__all__ = ['CellState', 'Mode', 'MouseButton', 'ShapeError', 'PuzzleFormatError', 'ValidationError',
           'CluePair', 'compute_clues', 'check_solution',
           'Idle', 'Dragging', 'on_pointer_down', 'on_pointer_enter', 'on_pointer_up',
           'Puzzle', 'PuzzleStore']
