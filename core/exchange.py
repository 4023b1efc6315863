"""
File exchange for puzzle collections: backup/export to JSON and
import/restore from JSON.

A collection file is a JSON array of puzzle records (see core.puzzle).
Reading never mutates any collection; callers decide whether imported
puzzles replace (restore) or extend (import) what they hold.
"""
import json
import logging
from typing import Any, Iterable, List

from core.puzzle import Puzzle
from core.types import PuzzleFormatError

logger = logging.getLogger(__name__)


def puzzles_to_json(puzzles: Iterable[Puzzle]) -> List[dict]:
    return [puzzle.to_json() for puzzle in puzzles]


def parse_puzzles(data: Any) -> List[Puzzle]:
    """
    Validate parsed JSON as a puzzle collection.

    Raises:
        PuzzleFormatError: If `data` is not a list, an entry is malformed
            or two entries share an id
    """
    if not isinstance(data, list):
        raise PuzzleFormatError(f"Expected a list of puzzles, got {type(data).__name__}")

    puzzles = []
    seen_ids = set()
    for index, entry in enumerate(data):
        try:
            puzzle = Puzzle.from_json(entry)
        except PuzzleFormatError as e:
            raise PuzzleFormatError(f"Entry {index}: {e}") from e
        if puzzle.id in seen_ids:
            raise PuzzleFormatError(f"Entry {index}: duplicate id {puzzle.id!r}")
        seen_ids.add(puzzle.id)
        puzzles.append(puzzle)
    return puzzles


def loads_puzzles(text: str) -> List[Puzzle]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PuzzleFormatError(f"Invalid JSON format: {e}") from e
    return parse_puzzles(data)


def dumps_puzzles(puzzles: Iterable[Puzzle]) -> str:
    return json.dumps(puzzles_to_json(puzzles), indent=2)


def import_puzzles(path: str) -> List[Puzzle]:
    """
    Read a collection file.

    Raises:
        OSError: If the file cannot be read
        PuzzleFormatError: If the content is not a valid collection
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    puzzles = loads_puzzles(text)
    logger.info("Read %d puzzles from %s", len(puzzles), path)
    return puzzles


def export_puzzles(puzzles: Iterable[Puzzle], path: str) -> int:
    """
    Write a collection file.

    Returns:
        Number of puzzles written
    """
    records = puzzles_to_json(puzzles)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)
    logger.info("Wrote %d puzzles to %s", len(records), path)
    return len(records)
