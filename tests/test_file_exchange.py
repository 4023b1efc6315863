"""
File exchange and local storage:
- Export then import preserves every record
- Malformed collection files raise PuzzleFormatError
- PuzzleStore seeds from the default collection on first use
"""

import json
import os

import pytest

from core.exchange import export_puzzles, import_puzzles, loads_puzzles
from core.puzzle import Puzzle
from core.storage import PuzzleStore
from core.types import PuzzleFormatError


def test_export_then_import_preserves_records(sample_puzzles, tmp_path):
    path = str(tmp_path / "backup.json")
    assert export_puzzles(sample_puzzles, path) == len(sample_puzzles)

    loaded = import_puzzles(path)
    assert [p.id for p in loaded] == [p.id for p in sample_puzzles]
    assert [p.name for p in loaded] == [p.name for p in sample_puzzles]
    assert [p.grid for p in loaded] == [p.grid for p in sample_puzzles]
    assert [p.clues for p in loaded] == [p.clues for p in sample_puzzles]


def test_exported_file_is_plain_json_array(sample_puzzles, tmp_path):
    path = tmp_path / "backup.json"
    export_puzzles(sample_puzzles, str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert isinstance(data, list)
    assert set(data[0]) == {"id", "name", "size", "grid", "rows", "cols"}
    assert any(isinstance(entry["id"], str) for entry in data), "String ids survive unchanged"


def test_not_a_list_is_rejected(puzzle_path):
    with pytest.raises(PuzzleFormatError, match="list of puzzles"):
        import_puzzles(puzzle_path("not_a_list.json"))


def test_jagged_entry_is_rejected_with_its_index(puzzle_path):
    with pytest.raises(PuzzleFormatError, match="Entry 0"):
        import_puzzles(puzzle_path("jagged_grid.json"))


def test_invalid_json_text():
    with pytest.raises(PuzzleFormatError, match="Invalid JSON format"):
        loads_puzzles("[{not json")


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        import_puzzles(str(tmp_path / "nowhere.json"))


# =============================================================================
# PuzzleStore
# =============================================================================

def test_store_seeds_from_defaults(tmp_path, puzzle_path):
    store = PuzzleStore(path=str(tmp_path / "store" / "puzzles.json"),
                        default_path=puzzle_path("sample_collection.json"))
    assert not store.exists()

    puzzles = store.load()
    assert [p.name for p in puzzles] == ["Plus", "Smiley", "Arrow"]
    assert store.exists(), "Defaults are written to the store on first load"


def test_store_without_defaults_starts_empty(tmp_path):
    store = PuzzleStore(path=str(tmp_path / "puzzles.json"), default_path="")
    assert store.load() == []
    assert not store.exists()


def test_store_save_and_load(tmp_path):
    store = PuzzleStore(path=str(tmp_path / "puzzles.json"), default_path="")
    puzzles = [
        Puzzle.create("One", [[1, 0], [0, 1]], puzzle_id=1),
        Puzzle.create("Two", [[1, 1, 1]], puzzle_id=2),
    ]
    store.save(puzzles)
    assert store.load() == puzzles
    assert [f for f in os.listdir(str(tmp_path)) if f.startswith(".puzzles-")] == []


def test_store_prefers_saved_collection_over_defaults(tmp_path, puzzle_path):
    store = PuzzleStore(path=str(tmp_path / "puzzles.json"),
                        default_path=puzzle_path("sample_collection.json"))
    store.save([Puzzle.create("Mine", [[1]], puzzle_id=99)])
    assert [p.id for p in store.load()] == [99]


def test_corrupt_store_raises(tmp_path):
    path = tmp_path / "puzzles.json"
    path.write_text("{corrupt", encoding="utf-8")
    with pytest.raises(PuzzleFormatError):
        PuzzleStore(path=str(path), default_path="").load()


def test_bundled_defaults_load():
    store = PuzzleStore(path="unused.json")
    puzzles = import_puzzles(store.default_path)
    assert len(puzzles) >= 3
    assert len({p.id for p in puzzles}) == len(puzzles)


def test_repeated_ids_are_rejected(tmp_path):
    path = tmp_path / "twins.json"
    path.write_text(json.dumps([
        {"id": 7, "name": "A", "grid": [[1, 0]]},
        {"id": 7, "name": "B", "grid": [[0, 1]]},
    ]), encoding="utf-8")
    with pytest.raises(PuzzleFormatError, match="Entry 1: duplicate id 7"):
        import_puzzles(str(path))


def test_same_id_with_different_type_is_distinct():
    puzzles = loads_puzzles('[{"id": 7, "name": "A", "grid": [[1]]}, {"id": "7", "name": "B", "grid": [[1]]}]')
    assert [p.id for p in puzzles] == [7, "7"]
