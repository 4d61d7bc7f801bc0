"""
Interactive maze solver.
Enter a maze, view it, and solve it with DFS or BFS from a keyboard menu.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

import readchar
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_maze, render_result
from maze_session import MazeSession, check_row, parse_dimensions
from maze_types import MazeError, MazeFormatError, SearchStrategy

logger = logging.getLogger(__name__)

MENU_CHOICES = {
    "1": "Input the maze",
    "2": "View the maze",
    "3": "Perform DFS for the maze",
    "4": "Perform BFS for the maze",
    "5": "Clear the screen",
    "6": "Exit",
}


class InteractiveMazeSolver:
    """Menu loop around a MazeSession."""

    def __init__(
        self,
        session: MazeSession | None = None,
        console: Console | None = None,
        read_key: Callable[[], str] = readchar.readkey,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.session = session if session is not None else MazeSession()
        self.console = console if console is not None else Console()
        self.read_key = read_key
        self.read_line = read_line if read_line is not None else self.console.input
        self.colored = self.console.is_terminal

    def show_menu(self) -> None:
        menu = Text()
        for key, label in MENU_CHOICES.items():
            menu.append(f"{key}. ", style="bold cyan")
            menu.append(f"{label}\n")
        if self.session.has_maze:
            maze = self.session.maze
            menu.append(f"\nCurrent maze: {maze.rows}x{maze.cols}", style="dim")
        else:
            menu.append("\nNo maze entered yet", style="dim")
        self.console.print(Panel(menu, title="Operations for the maze", border_style="green", width=60))

    def read_choice(self) -> str:
        """Read menu keys until one is in range."""
        while True:
            self.console.print("Enter your choice: ", end="")
            key = self.read_key()
            self.console.print(key, markup=False, highlight=False)
            if key in MENU_CHOICES:
                return key
            self.console.print("Entered choice is out of range!", style="red")

    def input_maze(self) -> None:
        """Prompt for dimensions and rows, re-prompting on bad input, then rebuild the maze."""
        while True:
            try:
                rows, cols = parse_dimensions(self.read_line("Enter the dimension of the matrix (rows x columns): "))
                break
            except MazeFormatError as e:
                self._error(e)

        legend = Text()
        legend.append("S", style="bold green")
        legend.append(" - Starting cell\n")
        legend.append("E", style="bold red")
        legend.append(" - Ending cell\n")
        legend.append(".", style="bold")
        legend.append(" - Movable cell\n")
        legend.append("#", style="bold blue")
        legend.append(" - Wall (1 also accepted)")
        self.console.print(legend)

        maze_rows: list[str] = []
        while len(maze_rows) < rows:
            row = self.read_line(f"Enter row {len(maze_rows) + 1} for the maze: ").strip()
            try:
                check_row(row, cols)
            except MazeFormatError as e:
                self._error(e)
                continue
            maze_rows.append(row)

        try:
            self.session.load(maze_rows)
        except MazeError as e:
            self._error(e)
            self.console.print("Maze was not created", style="red")
            return
        self.console.print("MAZE CREATED SUCCESSFULLY!!!", style="bold green")

    def view_maze(self) -> None:
        if not self.session.has_maze:
            self.console.print("Please fill the maze and try to view the maze")
            return
        self.console.print("Original Maze:", style="bold")
        self.console.print(Text.from_ansi(render_maze(self.session.maze.render_original(), self.colored)))

    def solve(self, strategy: SearchStrategy) -> None:
        if not self.session.has_maze:
            self.console.print(f"Please fill the maze and try to perform {strategy.label} for the maze")
            return
        self.console.print(f"Solving maze using {strategy.label}:", style="bold")
        result = self.session.solve(strategy)
        self.console.print(render_result(result), markup=False, highlight=False)
        if result.found:
            cells = self.session.maze.render_with_path(result.path)
            self.console.print(Text.from_ansi(render_maze(cells, self.colored)))

    def run(self) -> None:
        """Run the menu until the user exits."""
        self.console.print("WELCOME TO THE MAZE SOLVER!", style="bold", justify="center")
        self.console.print(
            "Solve a maze with DFS (Depth First Search) and BFS (Breadth First Search)",
            justify="center",
        )
        try:
            while True:
                self.show_menu()
                choice = self.read_choice()

                if choice == "1":
                    self.input_maze()
                elif choice == "2":
                    self.view_maze()
                elif choice == "3":
                    self.solve(SearchStrategy.DEPTH_FIRST)
                elif choice == "4":
                    self.solve(SearchStrategy.BREADTH_FIRST)
                elif choice == "5":
                    self.console.clear()
                elif choice == "6":
                    self.console.print("THANK YOU FOR PLAYING THE MAZE SOLVER!!!", style="bold")
                    break
        except KeyboardInterrupt:
            self.console.print("Interrupted by user")

    def _error(self, error: Exception) -> None:
        self.console.print(Text(str(error), style="red"))


# =============================================================================
# Bundled layouts and entry point
# =============================================================================

LAYOUTS = dict(
    sample="S....|#.#..|..#.#|#.#E.|#...#",
    walled="S#E",
    adjacent="SE",
    spiral="S.........|11111111.1|.......1.1|.11111.1.1|.1...1.1.1|.1.E.1...1|.1.111111.|.1........|.11111111.|..........",
)


def report(definition: str, colored: bool = True) -> str:
    """Render a maze and the result of both searches on it."""
    session = MazeSession()
    maze = session.load_concise(definition)

    sections = ["Original Maze:", render_maze(maze.render_original(), colored)]
    for strategy in (SearchStrategy.DEPTH_FIRST, SearchStrategy.BREADTH_FIRST):
        result = session.solve(strategy)
        sections.append("")
        sections.append(render_result(result))
        if result.found:
            sections.append(render_maze(maze.render_with_path(result.path), colored))
    return "\n".join(sections)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point.

    Usage:
        maze-solver                   interactive, no maze loaded
        maze-solver <layout>          interactive, bundled layout preloaded
        maze-solver report <layout>   print both searches on a bundled layout
    """
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] == "report":
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
        name = args[1] if len(args) > 1 else "sample"
        if name not in LAYOUTS:
            print(f"Unknown layout '{name}'. Available: {', '.join(sorted(LAYOUTS))}")
            return 1
        print(report(LAYOUTS[name]))
        return 0

    session = MazeSession()
    if args:
        if args[0] not in LAYOUTS:
            print(f"Unknown layout '{args[0]}'. Available: {', '.join(sorted(LAYOUTS))}")
            return 1
        logger.info("Preloading layout '%s'", args[0])
        session.load_concise(LAYOUTS[args[0]])

    InteractiveMazeSolver(session).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
