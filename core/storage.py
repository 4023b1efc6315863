"""
Local persistence of the puzzle collection.

PuzzleStore keeps the collection in a single JSON file in the user's home
directory. On first use, when no store exists yet, the bundled default
collection is loaded and written to the store.
"""
import logging
import os
import tempfile
from typing import Iterable, List, Optional

from core import config
from core.exchange import dumps_puzzles, import_puzzles
from core.puzzle import Puzzle

logger = logging.getLogger(__name__)


class PuzzleStore:
    """
    JSON file store for the puzzle collection.

    Attributes:
        path: Location of the store file
        default_path: Collection used when the store does not exist yet
    """

    def __init__(self, path: Optional[str] = None, default_path: Optional[str] = None):
        self.path = path or config.STORAGE_PATH
        self.default_path = config.DEFAULT_PUZZLES_PATH if default_path is None else default_path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load(self) -> List[Puzzle]:
        """
        Load the stored collection, seeding it from the defaults on first use.

        Raises:
            PuzzleFormatError: If the store (or the default collection) is corrupt
            OSError: If an existing file cannot be read
        """
        if self.exists():
            return import_puzzles(self.path)

        if not self.default_path or not os.path.isfile(self.default_path):
            logger.info("No puzzle store at %s and no default collection, starting empty", self.path)
            return []

        logger.info("No puzzle store at %s, loading defaults from %s", self.path, self.default_path)
        puzzles = import_puzzles(self.default_path)
        self.save(puzzles)
        return puzzles

    def save(self, puzzles: Iterable[Puzzle]) -> None:
        """Write the collection atomically (temp file + replace)."""
        puzzles = list(puzzles)
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix=".puzzles-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(dumps_puzzles(puzzles))
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logger.debug("Saved %d puzzles to %s", len(puzzles), self.path)
