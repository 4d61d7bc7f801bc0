"""
Shared type definitions for the maze solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Orthogonal direction for neighbour lookup."""

    N = (-1, 0)  # Up (decreasing row)
    E = (0, 1)  # Right (increasing col)
    S = (1, 0)  # Down (increasing row)
    W = (0, -1)  # Left (decreasing col)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


# Neighbours are always listed in this order
NEIGHBOR_ORDER: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)


# =============================================================================
# Marker Alphabet
# =============================================================================

START = "S"
END = "E"
OPEN = "."
WALL = "#"
ALT_WALL = "1"
PATH = "*"

WALL_MARKERS = frozenset({WALL, ALT_WALL})
INPUT_MARKERS = frozenset({START, END, OPEN, WALL, ALT_WALL})


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Position:
    """A (row, col) cell coordinate."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position:
        dr, dc = direction.delta
        return Position(self.row + dr, self.col + dc)


Cells = tuple[tuple[str, ...], ...]
Path = tuple[Position, ...]


@dataclass(frozen=True)
class Grid:
    """A 2D grid of single-character markers with its start and end cells."""

    cells: Cells
    start: Position
    end: Position

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def marker_at(self, pos: Position) -> str:
        return self.cells[pos.row][pos.col]


# =============================================================================
# Search Types
# =============================================================================


class SearchStrategy(Enum):
    """Frontier discipline for a maze search."""

    DEPTH_FIRST = "dfs"  # Last in, first out
    BREADTH_FIRST = "bfs"  # First in, first out

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single search: the path found (empty if none) and effort spent."""

    strategy: SearchStrategy
    path: Path
    nodes_explored: int

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def path_length(self) -> int:
        return len(self.path)


# =============================================================================
# Errors
# =============================================================================


class MazeError(ValueError):
    """Base class for maze construction and session errors."""


class MazeFormatError(MazeError):
    """Maze text is malformed (shape, alphabet or dimensions)."""


class RowLengthError(MazeFormatError):
    """An entered row does not match the declared column count."""


class MissingMarkerError(MazeError):
    """The maze has no start or no end marker."""


class DuplicateMarkerError(MazeError):
    """The maze has more than one start or end marker."""


class NoMazeError(MazeError):
    """An operation needs a maze but none has been entered."""
