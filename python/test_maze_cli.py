"""Tests for the maze session and the interactive menu."""

import io
from typing import Callable, Iterable

import pytest
from rich.console import Console

from maze_cli import LAYOUTS, InteractiveMazeSolver, main, report
from maze_session import MazeSession, check_row, parse_dimensions
from maze_types import (
    MazeFormatError,
    MissingMarkerError,
    NoMazeError,
    Position,
    RowLengthError,
    SearchStrategy,
)


def scripted(responses: Iterable[str]) -> Callable[..., str]:
    """Reader that returns the given responses in order, ignoring any prompt."""
    it = iter(responses)

    def read(*_args: object) -> str:
        return next(it)

    return read


def make_solver(
    keys: Iterable[str],
    lines: Iterable[str] = (),
    session: MazeSession | None = None,
) -> tuple[InteractiveMazeSolver, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, width=120, force_terminal=False)
    solver = InteractiveMazeSolver(
        session=session,
        console=console,
        read_key=scripted(keys),
        read_line=scripted(lines),
    )
    return solver, out


# =============================================================================
# Session
# =============================================================================


class TestParseDimensions:
    """Tests for reading 'rows x cols'."""

    @pytest.mark.parametrize("text", ["5 4", "5x4", "5 x 4", " 5X4 ", "5   4"])
    def test_accepted_forms(self, text: str) -> None:
        assert parse_dimensions(text) == (5, 4)

    @pytest.mark.parametrize("text", ["", "5", "five four", "5,4", "-1 3", "5 4 3"])
    def test_rejected_forms(self, text: str) -> None:
        with pytest.raises(MazeFormatError, match="Invalid dimensions"):
            parse_dimensions(text)

    def test_zero_rejected(self) -> None:
        """Dimensions must be positive."""
        with pytest.raises(MazeFormatError, match="positive"):
            parse_dimensions("0 3")


class TestCheckRow:
    """Tests for the per-row length check."""

    def test_exact_length(self) -> None:
        check_row("S.E", 3)

    def test_too_long(self) -> None:
        with pytest.raises(RowLengthError, match="greater than"):
            check_row("S..E", 3)

    def test_too_short(self) -> None:
        with pytest.raises(RowLengthError, match="smaller than"):
            check_row("SE", 3)


class TestMazeSession:
    """Tests for owning and replacing the current maze."""

    def test_starts_empty(self) -> None:
        session = MazeSession()

        assert not session.has_maze
        with pytest.raises(NoMazeError):
            session.maze

    def test_solve_without_maze(self) -> None:
        """Searching before a maze is entered is an error."""
        with pytest.raises(NoMazeError):
            MazeSession().solve(SearchStrategy.BREADTH_FIRST)

    def test_load(self) -> None:
        session = MazeSession()
        maze = session.load(["S.", ".E"])

        assert session.has_maze
        assert session.maze is maze

    def test_load_replaces(self) -> None:
        """Loading again discards the previous maze."""
        session = MazeSession()
        first = session.load(["SE"])
        second = session.load_concise("S.|.E")

        assert session.maze is second
        assert second is not first
        assert session.maze.end == Position(1, 1)

    def test_failed_load_keeps_previous(self) -> None:
        """A maze that fails to build never replaces the current one."""
        session = MazeSession()
        original = session.load(["SE"])

        with pytest.raises(MissingMarkerError):
            session.load(["S.."])

        assert session.maze is original

    def test_solve(self) -> None:
        session = MazeSession()
        session.load(["SE"])

        result = session.solve(SearchStrategy.DEPTH_FIRST)

        assert result.path == (Position(0, 0), Position(0, 1))


# =============================================================================
# Interactive Menu
# =============================================================================


class TestInteractiveMazeSolver:
    """Tests driving the menu with scripted input."""

    def test_exit(self) -> None:
        solver, out = make_solver(["6"])
        solver.run()

        assert "THANK YOU FOR PLAYING THE MAZE SOLVER!!!" in out.getvalue()

    def test_out_of_range_choice_reprompts(self) -> None:
        """Keys outside 1-6 are rejected until a valid one arrives."""
        solver, out = make_solver(["9", "x", "6"])
        solver.run()

        assert out.getvalue().count("Entered choice is out of range!") == 2
        assert "THANK YOU" in out.getvalue()

    def test_commands_need_a_maze(self) -> None:
        """View, DFS and BFS print a hint when no maze is loaded."""
        solver, out = make_solver(["2", "3", "4", "6"])
        solver.run()

        text = out.getvalue()
        assert "Please fill the maze and try to view the maze" in text
        assert "Please fill the maze and try to perform DFS for the maze" in text
        assert "Please fill the maze and try to perform BFS for the maze" in text

    def test_input_and_solve(self) -> None:
        """Bad dimensions and rows are re-prompted; the maze is then solved."""
        lines = ["abc", "2 3", "S....", "S.", "S.#", "..E"]
        solver, out = make_solver(["1", "4", "6"], lines)
        solver.run()

        text = out.getvalue()
        assert "Invalid dimensions" in text
        assert "Row given has column size greater than the required size!" in text
        assert "Row given has length smaller than the required size!" in text
        assert "MAZE CREATED SUCCESSFULLY!!!" in text
        assert "BFS Stats:" in text
        assert "Path length: 4" in text
        assert "Nodes explored: 5" in text
        assert "S * #\n. * E" in text
        assert solver.session.maze.cols == 3

    def test_invalid_maze_not_created(self) -> None:
        """A maze without an end is rejected and the previous one kept."""
        session = MazeSession()
        previous = session.load(["SE"])
        solver, out = make_solver(["1", "6"], ["1 3", "S.."], session=session)
        solver.run()

        text = out.getvalue()
        assert "no end cell" in text
        assert "Maze was not created" in text
        assert solver.session.maze is previous

    def test_view_maze(self) -> None:
        session = MazeSession()
        session.load(["S#", ".E"])
        solver, out = make_solver(["2", "6"], session=session)
        solver.run()

        assert "Original Maze:" in out.getvalue()
        assert "S #\n. E" in out.getvalue()

    def test_no_path(self) -> None:
        """An unreachable end is reported without rendering a path."""
        session = MazeSession()
        session.load(["S#E"])
        solver, out = make_solver(["3", "6"], session=session)
        solver.run()

        assert "DFS: No path found!" in out.getvalue()

    def test_clear_screen(self) -> None:
        """Clearing the screen keeps the loop running."""
        solver, out = make_solver(["5", "6"])
        solver.run()

        assert "THANK YOU" in out.getvalue()

    def test_keyboard_interrupt(self) -> None:
        def interrupt() -> str:
            raise KeyboardInterrupt

        out = io.StringIO()
        solver = InteractiveMazeSolver(console=Console(file=out, width=120), read_key=interrupt)
        solver.run()

        assert "Interrupted by user" in out.getvalue()


# =============================================================================
# Report mode and entry point
# =============================================================================


class TestReport:
    """Tests for the non-interactive report."""

    def test_sample_report(self) -> None:
        text = report(LAYOUTS["sample"], colored=False)

        assert text.startswith("Original Maze:\nS . . . .")
        assert "DFS Stats:\nPath length: 9\nNodes explored: 10" in text
        assert "BFS Stats:\nPath length: 7\nNodes explored: 14" in text
        assert "S * * * .\n# . # * ." in text

    def test_walled_report(self) -> None:
        text = report(LAYOUTS["walled"], colored=False)

        assert "DFS: No path found!" in text
        assert "BFS: No path found!" in text
        assert "*" not in text

    @pytest.mark.parametrize("name", sorted(LAYOUTS))
    def test_every_layout_builds(self, name: str) -> None:
        assert "Original Maze:" in report(LAYOUTS[name], colored=False)

    def test_spiral_is_solvable(self) -> None:
        """The bundled spiral has a path for both searches."""
        text = report(LAYOUTS["spiral"], colored=False)

        assert "DFS Stats:" in text
        assert "BFS Stats:" in text

    def test_main_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["report", "adjacent"]) == 0

        captured = capsys.readouterr()
        assert "Path length: 2" in captured.out

    def test_main_unknown_layout(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["report", "nope"]) == 1
        assert main(["nope"]) == 1

        captured = capsys.readouterr()
        assert "Unknown layout 'nope'" in captured.out
        assert "sample" in captured.out
