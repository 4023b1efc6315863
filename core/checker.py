"""
Solution checking: compare a player's grid with the stored answer.
"""
from typing import Sequence

from core.types import CellState


def _same_shape(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> bool:
    if len(a) != len(b):
        return False
    return all(len(row_a) == len(row_b) for row_a, row_b in zip(a, b))


def count_mismatches(solve_grid: Sequence[Sequence[int]],
                     puzzle_grid: Sequence[Sequence[int]]) -> int:
    """
    Number of cells whose filled/non-filled classification differs.

    MARKED counts as non-filled. Grids must have the same shape.
    """
    if not _same_shape(solve_grid, puzzle_grid):
        raise ValueError("Solve grid and puzzle grid have different dimensions")
    mismatches = 0
    for row_a, row_b in zip(solve_grid, puzzle_grid):
        for a, b in zip(row_a, row_b):
            if (a == CellState.FILLED) != (b == CellState.FILLED):
                mismatches += 1
    return mismatches


def check_solution(solve_grid: Sequence[Sequence[int]],
                   puzzle_grid: Sequence[Sequence[int]]) -> bool:
    """True if both grids have identical shape and identical filled cells."""
    if not _same_shape(solve_grid, puzzle_grid):
        return False
    return count_mismatches(solve_grid, puzzle_grid) == 0
