"""
Maze parsing utilities.

Provides two input formats:
1. A sequence of row strings, one character per cell
2. Concise format: a single string with rows separated by | or newlines
"""

from __future__ import annotations

import logging
from typing import Sequence

from maze_types import (
    END,
    INPUT_MARKERS,
    START,
    DuplicateMarkerError,
    Grid,
    MazeFormatError,
    MissingMarkerError,
    Position,
)

__all__ = ["parse_maze", "parse_maze_concise"]

logger = logging.getLogger(__name__)


def parse_maze(rows: Sequence[str]) -> Grid:
    """
    Parse a maze from a sequence of equal-length row strings.

    Markers:
    - 'S': start cell (exactly one)
    - 'E': end cell (exactly one)
    - '.': movable cell
    - '#' or '1': wall

    Example:
        ["S.#", "..E"]
        Creates a 2x3 grid with start at (0, 0) and end at (1, 2).

    Args:
        rows: Row strings, top to bottom

    Returns:
        Grid with the recorded start and end positions

    Raises:
        MazeFormatError: Empty input, empty rows, inconsistent row lengths or unknown markers
        MissingMarkerError: No start or no end marker
        DuplicateMarkerError: More than one start or end marker
    """
    if not rows:
        raise MazeFormatError("Maze has no rows")

    cols = len(rows[0])
    if cols == 0:
        raise MazeFormatError("Maze row 0 is empty")

    # Validate all rows have same length
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in maze\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{rows[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise MazeFormatError(error_msg)

    starts: list[Position] = []
    ends: list[Position] = []

    for row_idx, row_str in enumerate(rows):
        for col_idx, marker in enumerate(row_str):
            if marker not in INPUT_MARKERS:
                raise MazeFormatError(
                    f"Invalid character: '{marker}'\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid markers:\n"
                    f"    - 'S': Starting cell\n"
                    f"    - 'E': Ending cell\n"
                    f"    - '.': Movable cell\n"
                    f"    - '#' or '1': Wall"
                )
            if marker == START:
                starts.append(Position(row_idx, col_idx))
            elif marker == END:
                ends.append(Position(row_idx, col_idx))

    start = _single_marker(starts, "start", START)
    end = _single_marker(ends, "end", END)

    grid = Grid(tuple(tuple(row) for row in rows), start, end)
    logger.debug("parse_maze: %dx%d grid, start=%s, end=%s", grid.rows, grid.cols, start, end)
    return grid


def _single_marker(found: list[Position], name: str, marker: str) -> Position:
    """Return the only position in found, or raise if there are none or several."""
    if not found:
        raise MissingMarkerError(f"Maze has no {name} cell (expected one '{marker}')")
    if len(found) > 1:
        listed = ", ".join(f"({p.row}, {p.col})" for p in found)
        raise DuplicateMarkerError(
            f"Maze has {len(found)} {name} cells (expected one '{marker}')\n"
            f"  Found at: {listed}"
        )
    return found[0]


def parse_maze_concise(definition: str) -> Grid:
    """
    Parse a maze from a single string.

    Rows are separated by '|' or newlines. Whitespace around each row is
    ignored, as are blank lines.

    Example:
        \"\"\"
        S.#|..E
        \"\"\"
        is the same maze as parse_maze(["S.#", "..E"]).
    """
    rows = [
        row.strip()
        for line in definition.strip().split("\n")
        for row in line.split("|")
        if row.strip()
    ]
    return parse_maze(rows)
