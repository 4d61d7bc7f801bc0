"""
Maze graph with depth-first and breadth-first path search.
Two-phase design: build adjacency once (construction) -> search (per call).
"""

from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Sequence

from maze_parser import parse_maze
from maze_types import (
    END,
    NEIGHBOR_ORDER,
    PATH,
    START,
    WALL_MARKERS,
    Cells,
    Grid,
    Path,
    Position,
    SearchResult,
    SearchStrategy,
)

logger = logging.getLogger(__name__)

Adjacency = Mapping[Position, tuple[Position, ...]]

# How each strategy removes the next coordinate from the frontier
_FRONTIER_POP: dict[SearchStrategy, Callable[[deque[Position]], Position]] = {
    SearchStrategy.DEPTH_FIRST: deque.pop,
    SearchStrategy.BREADTH_FIRST: deque.popleft,
}


def reconstruct_path(came_from: Mapping[Position, Position], current: Position) -> Path:
    """Follow predecessor links back to the start (its own predecessor) and return start -> current."""
    path = [current]
    while came_from[current] != current:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return tuple(path)


class MazeGraph:
    """A parsed maze and its precomputed neighbour relation."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._adjacency: Adjacency = MappingProxyType(self._build_adjacency())
        logger.debug(
            "MazeGraph: %dx%d grid, %d navigable cells",
            grid.rows,
            grid.cols,
            len(self._adjacency),
        )

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> MazeGraph:
        """Parse rows and build the graph; raises the parser's MazeError subclasses."""
        return cls(parse_maze(rows))

    # =========================================================================
    # Grid Model
    # =========================================================================

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def start(self) -> Position:
        return self._grid.start

    @property
    def end(self) -> Position:
        return self._grid.end

    def is_navigable(self, row: int, col: int) -> bool:
        """True iff (row, col) is inside the grid and not a wall."""
        return (
            0 <= row < self._grid.rows
            and 0 <= col < self._grid.cols
            and self._grid.cells[row][col] not in WALL_MARKERS
        )

    # =========================================================================
    # Adjacency
    # =========================================================================

    def _build_adjacency(self) -> dict[Position, tuple[Position, ...]]:
        adjacency: dict[Position, tuple[Position, ...]] = {}
        for row in range(self._grid.rows):
            for col in range(self._grid.cols):
                if not self.is_navigable(row, col):
                    continue
                here = Position(row, col)
                neighbors = []
                for direction in NEIGHBOR_ORDER:
                    there = here.step(direction)
                    if self.is_navigable(there.row, there.col):
                        neighbors.append(there)
                adjacency[here] = tuple(neighbors)
        return adjacency

    @property
    def adjacency(self) -> Adjacency:
        """Read-only mapping from each navigable cell to its neighbours in N, E, S, W order."""
        return self._adjacency

    @property
    def navigable_count(self) -> int:
        return len(self._adjacency)

    def neighbors(self, pos: Position) -> tuple[Position, ...]:
        """Navigable neighbours of pos; empty for walls and out-of-range cells."""
        return self._adjacency.get(pos, ())

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, strategy: SearchStrategy) -> SearchResult:
        """
        Search from start to end using the given frontier discipline.

        Each coordinate enters the frontier at most once. nodes_explored counts
        removals from the frontier, so it includes the end when a path exists.

        Args:
            strategy: DEPTH_FIRST (LIFO frontier) or BREADTH_FIRST (FIFO frontier)

        Returns:
            SearchResult whose path runs start -> end inclusive, or is empty if
            the end is unreachable
        """
        pop = _FRONTIER_POP[strategy]
        start, end = self.start, self.end

        frontier: deque[Position] = deque([start])
        visited: set[Position] = {start}
        came_from: dict[Position, Position] = {start: start}
        nodes_explored = 0

        while frontier:
            current = pop(frontier)
            nodes_explored += 1

            if current == end:
                path = reconstruct_path(came_from, current)
                logger.info(
                    "%s: path length %d, nodes explored %d",
                    strategy.label,
                    len(path),
                    nodes_explored,
                )
                return SearchResult(strategy, path, nodes_explored)

            for neighbor in self.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    came_from[neighbor] = current
                    frontier.append(neighbor)

        logger.info("%s: no path found (nodes explored %d)", strategy.label, nodes_explored)
        return SearchResult(strategy, (), nodes_explored)

    def depth_first_search(self) -> SearchResult:
        return self.search(SearchStrategy.DEPTH_FIRST)

    def breadth_first_search(self) -> SearchResult:
        return self.search(SearchStrategy.BREADTH_FIRST)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_original(self) -> Cells:
        return self._grid.cells

    def render_with_path(self, path: Iterable[Position]) -> Cells:
        """Copy of the grid with path cells marked '*'; start and end keep their markers."""
        buffer = [list(row) for row in self._grid.cells]
        for pos in path:
            if buffer[pos.row][pos.col] not in (START, END):
                buffer[pos.row][pos.col] = PATH
        return tuple(tuple(row) for row in buffer)
