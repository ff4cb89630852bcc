"""Rich terminal frontend — styled tables and panels.

Uses the ``rich`` library for the board and status lines while sharing the
same solver and playback helpers as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from unblock.engine.playback import describe_moves
from unblock.engine.solver import Solver
from unblock.frontend.cli import DEFAULT_DELAY
from unblock.models.board import EMPTY, GOAL_MARKER, Board
from unblock.models.puzzle import Puzzle

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, target: tuple[int, int]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=1, justify="center")

    for y, row in enumerate(board.cells):
        cells: list[str] = []
        for x, marker in enumerate(row):
            if marker == GOAL_MARKER:
                cells.append(f"[bold red]{marker}[/bold red]")
            elif marker == EMPTY and (x, y) == target:
                cells.append("[yellow]·[/yellow]")
            elif marker == EMPTY:
                cells.append("[dim]·[/dim]")
            else:
                cells.append(f"[bold white]{marker}[/bold white]")
        table.add_row(*cells)

    return table


# -- public entry point -------------------------------------------------------


def run(puzzle: Puzzle, delay: float = DEFAULT_DELAY, limit: int | None = None) -> int:
    """Solve *puzzle* and animate the solution.

    Returns the number of moves, or -1 if the puzzle has no solution.
    """
    size = puzzle.size
    with console.status(f"Solving {puzzle.name}…", spinner="dots"):
        solver = Solver.for_puzzle(puzzle, limit=limit)
        path = solver.solve()

    if not path:
        console.print(f"[red]No solution for {puzzle.name!r}.[/red]")
        console.print(f"[dim]Explored {solver.stats.discovered} states.[/dim]")
        return -1

    moves = describe_moves(path)
    for i, state in enumerate(path):
        console.clear()

        progress = Text()
        if i == 0:
            progress.append("  Start ", style="bold cyan")
            progress.append(f"(target x={puzzle.target[0]}, y={puzzle.target[1]})", style="dim")
        else:
            progress.append(f"  Move {i}/{len(moves)} ", style="bold cyan")
            progress.append(f"({moves[i - 1]})", style="dim")

        panel = Panel(
            Align.center(_render_board(state.render(), puzzle.target)),
            title=f"[bold cyan]Unblock  {puzzle.name}  {size}×{size}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(Group(panel, progress)))
        time.sleep(delay)

    console.print(f"\n[bold green]Moves: {len(moves)}[/bold green]")
    console.print(
        f"[dim]Explored {solver.stats.discovered} states "
        f"in {solver.stats.elapsed:.2f}s.[/dim]"
    )
    return len(moves)
