"""
Session state for the maze solver: the current maze and input checks.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from maze_graph import MazeGraph
from maze_parser import parse_maze_concise
from maze_types import MazeFormatError, NoMazeError, RowLengthError, SearchResult, SearchStrategy

logger = logging.getLogger(__name__)

_DIMENSIONS_RE = re.compile(r"^\s*(\d+)\s*(?:[xX]\s*|\s+)(\d+)\s*$")


def parse_dimensions(text: str) -> tuple[int, int]:
    """Parse 'rows cols', 'rowsxcols' or 'rows x cols' into two positive integers."""
    match = _DIMENSIONS_RE.match(text)
    if match is None:
        raise MazeFormatError(
            f"Invalid dimensions: '{text.strip()}'\n"
            f"  Expected format: 'rows columns' or 'rows x columns' (e.g. '5 5', '5x5')"
        )
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows < 1 or cols < 1:
        raise MazeFormatError(f"Dimensions must be positive, got {rows} x {cols}")
    return rows, cols


def check_row(row: str, cols: int) -> None:
    """Raise RowLengthError if an entered row does not have exactly cols cells."""
    if len(row) > cols:
        raise RowLengthError("Row given has column size greater than the required size!")
    if len(row) < cols:
        raise RowLengthError("Row given has length smaller than the required size!")


class MazeSession:
    """Owns the current maze, if any. Loading a new maze replaces it wholesale."""

    def __init__(self) -> None:
        self._maze: MazeGraph | None = None

    @property
    def has_maze(self) -> bool:
        return self._maze is not None

    @property
    def maze(self) -> MazeGraph:
        if self._maze is None:
            raise NoMazeError("No maze has been entered")
        return self._maze

    def load(self, rows: Sequence[str]) -> MazeGraph:
        """Build a maze from rows; the current maze is kept if construction fails."""
        return self._replace(MazeGraph.from_rows(rows))

    def load_concise(self, definition: str) -> MazeGraph:
        return self._replace(MazeGraph(parse_maze_concise(definition)))

    def _replace(self, maze: MazeGraph) -> MazeGraph:
        self._maze = maze
        logger.info("Maze loaded: %dx%d, %d navigable cells", maze.rows, maze.cols, maze.navigable_count)
        return maze

    def solve(self, strategy: SearchStrategy) -> SearchResult:
        return self.maze.search(strategy)
