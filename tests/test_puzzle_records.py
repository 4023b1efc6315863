"""
Puzzle records:
- create() derives size and clues
- with_grid() keeps clues in sync with the grid
- from_json() validation and clue recomputation
- Creator grid validation and size descriptors
"""

import logging

import pytest

from core.puzzle import Puzzle, validate_creator_grid
from core.grid import create_empty_grid
from core.types import PuzzleFormatError
from utils.sizes import size_to_string, string_to_size, subgrid_size


def test_create_derives_size_and_clues():
    puzzle = Puzzle.create("Corner", [[1, 1], [1, 0]], puzzle_id=7)
    assert puzzle.id == 7
    assert puzzle.size == "2x2"
    assert puzzle.rows == ((2,), (1,))
    assert puzzle.cols == ((2,), (1,))


def test_create_generates_timestamp_id():
    puzzle = Puzzle.create("Dot", [[1]])
    assert isinstance(puzzle.id, int) and puzzle.id > 0


def test_create_rejects_marked_cells():
    with pytest.raises(ValueError):
        Puzzle.create("Bad", [[1, 2]])


def test_create_rejects_empty_grid():
    with pytest.raises(ValueError):
        Puzzle.create("Nothing", [])


def test_with_grid_recomputes_clues():
    puzzle = Puzzle.create("Line", [[1, 1, 1]], puzzle_id="line")
    edited = puzzle.with_grid([[1, 0, 1]], name="Dots")
    assert edited.id == "line"
    assert edited.name == "Dots"
    assert edited.rows == ((1, 1),)
    assert edited.cols == ((1,), (0,), (1,))
    assert puzzle.rows == ((3,),), "Original record is unchanged"


def test_json_round_trip_of_single_record():
    puzzle = Puzzle.create("Arrow", [[0, 1, 0], [1, 1, 1]], puzzle_id=1700000000099)
    data = puzzle.to_json()
    assert data == {
        "id": 1700000000099,
        "name": "Arrow",
        "size": "2x3",
        "grid": [[0, 1, 0], [1, 1, 1]],
        "rows": [[1], [3]],
        "cols": [[1], [2], [1]],
    }
    assert Puzzle.from_json(data) == puzzle


@pytest.mark.parametrize("data,fragment", [
    ({"name": "x", "grid": [[1]]}, "missing"),
    ({"id": 1, "grid": [[1]]}, "missing"),
    ({"id": 1, "name": "x", "grid": "11"}, "list of lists"),
    ({"id": 1, "name": "x", "grid": [[1, 0], [1]]}, "rectangular"),
    ({"id": 1, "name": "x", "grid": [[1, 2]]}, "Invalid cell value"),
    ({"id": True, "name": "x", "grid": [[1]]}, "id"),
    ({"id": 1, "name": 5, "grid": [[1]]}, "name"),
    (["not", "an", "object"], "object"),
])
def test_from_json_rejects_malformed_records(data, fragment):
    with pytest.raises(PuzzleFormatError) as excinfo:
        Puzzle.from_json(data)
    assert fragment in str(excinfo.value)


def test_from_json_recomputes_wrong_clues(caplog):
    data = {"id": 3, "name": "Wrong", "size": "1x2", "grid": [[1, 1]], "rows": [[1]], "cols": [[1], [1]]}
    with caplog.at_level(logging.WARNING):
        puzzle = Puzzle.from_json(data)
    assert puzzle.rows == ((2,),)
    assert "disagree" in caplog.text


def test_from_json_accepts_records_without_clues():
    puzzle = Puzzle.from_json({"id": "a", "name": "Bare", "grid": [[0, 1], [1, 0]]})
    assert puzzle.size == "2x2"
    assert puzzle.cols == ((1,), (1,))


def test_statistics():
    stats = Puzzle.create("Half", [[1, 0], [1, 0]], puzzle_id=1).get_statistics()
    assert stats["filled_cells"] == 2
    assert stats["empty_cells"] == 2
    assert stats["density"] == pytest.approx(0.5)


def test_validate_creator_grid_warns_on_blank_grid():
    issues = validate_creator_grid(create_empty_grid(5))
    assert [i.severity for i in issues] == ["warning"]


def test_validate_creator_grid_reports_empty_lines():
    issues = validate_creator_grid(((1, 0), (0, 0)))
    messages = sorted(i.message for i in issues)
    assert messages == ["Column 2 is empty", "Row 2 is empty"]
    assert all(i.severity == "info" for i in issues)


def test_size_descriptors():
    assert size_to_string(10, 10) == "10x10"
    assert string_to_size("15x20") == (15, 20)
    assert string_to_size("8") == (8, 8)
    with pytest.raises(ValueError):
        string_to_size("0x5")
    with pytest.raises(ValueError):
        string_to_size("axb")


@pytest.mark.parametrize("size,expected", [(10, 5), (15, 5), (8, 4), (12, 4), (7, 5)])
def test_subgrid_size(size, expected):
    assert subgrid_size(size) == expected
