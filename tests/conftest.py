import os
import sys
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.exchange import import_puzzles


@pytest.fixture
def puzzle_path():
    """Returns a function resolving a file under puzzles_json/."""
    def _path(name):
        return os.path.join(PROJECT_ROOT, "puzzles_json", name)
    return _path


@pytest.fixture
def load_puzzles(puzzle_path):
    """Returns a function that loads a puzzle collection from puzzles_json/."""
    def _load(name):
        return import_puzzles(puzzle_path(name))
    return _load


@pytest.fixture
def sample_puzzles(load_puzzles):
    return load_puzzles("sample_collection.json")
