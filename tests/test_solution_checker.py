"""
Solution checker:
- Exact filled-cell match is a solve
- MARKED compares as not filled
- Dimension mismatches never solve
"""

import pytest

from core.checker import check_solution, count_mismatches


ANSWER = [
    [1, 0, 1],
    [0, 1, 0],
]


def test_exact_match_solves():
    assert check_solution([[1, 0, 1], [0, 1, 0]], ANSWER) is True


def test_marked_cells_count_as_empty():
    assert check_solution([[1, 2, 1], [2, 1, 2]], ANSWER) is True


def test_marked_where_filled_expected_fails():
    assert check_solution([[2, 0, 1], [0, 1, 0]], ANSWER) is False


def test_extra_filled_cell_fails():
    assert check_solution([[1, 1, 1], [0, 1, 0]], ANSWER) is False
    assert count_mismatches([[1, 1, 1], [0, 1, 0]], ANSWER) == 1


@pytest.mark.parametrize("solve_grid", [
    [[1, 0, 1]],
    [[1, 0], [0, 1]],
    [[1, 0, 1], [0, 1, 0], [0, 0, 0]],
    [[1, 0, 1], [0, 1]],
])
def test_dimension_mismatch_fails(solve_grid):
    assert check_solution(solve_grid, ANSWER) is False


def test_count_mismatches_rejects_other_shapes():
    with pytest.raises(ValueError):
        count_mismatches([[1]], ANSWER)


def test_sample_answers_solve_themselves(sample_puzzles):
    for puzzle in sample_puzzles:
        assert check_solution(puzzle.grid, puzzle.grid), puzzle.name
