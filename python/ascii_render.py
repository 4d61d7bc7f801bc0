"""
ASCII rendering for mazes and search results.

Grids are displayed one row per line with a single space between markers,
optionally coloured per marker.
"""

from __future__ import annotations

from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze_types import ALT_WALL, END, OPEN, PATH, START, WALL, Cells, SearchResult

# Colour per marker; anything unlisted is left plain
MARKER_COLORS: dict[str, Callable[[str], str]] = {
    START: chalk.green,
    END: chalk.red,
    PATH: chalk.yellow,
    WALL: chalk.blue,
    ALT_WALL: chalk.blue,
    OPEN: chalk.white,
}


def format_grid(cells: Cells) -> str:
    """Plain rendering: markers separated by single spaces, one row per line."""
    return "\n".join(" ".join(row) for row in cells)


def render_maze(cells: Cells, colored: bool = True) -> str:
    """
    Render a marker grid to a string.

    Args:
        cells: Rows of single-character markers
        colored: Apply ANSI colours (start green, end red, path yellow, walls blue)

    Returns:
        Rendered string, with ANSI colour codes when colored is True
    """
    if not colored:
        return format_grid(cells)

    lines: list[str] = []
    for row in cells:
        line_parts = [MARKER_COLORS.get(marker, lambda s: s)(marker) for marker in row]
        lines.append(" ".join(line_parts))
    return "\n".join(lines)


def render_result(result: SearchResult) -> str:
    """Stats block for one search, or the no-path message."""
    label = result.strategy.label
    if not result.found:
        return f"{label}: No path found!"
    return (
        f"{label} Stats:\n"
        f"Path length: {result.path_length}\n"
        f"Nodes explored: {result.nodes_explored}"
    )
