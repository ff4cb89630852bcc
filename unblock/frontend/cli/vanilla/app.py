"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print and ANSI codes) to solve a puzzle and play the
solution back one frame per move.
"""

from __future__ import annotations

import sys
import time

from unblock.engine.playback import describe_moves
from unblock.engine.solver import Solver
from unblock.frontend.cli import DEFAULT_DELAY
from unblock.models.board import EMPTY, GOAL_MARKER, Board
from unblock.models.puzzle import Puzzle


# -- ANSI helpers -------------------------------------------------------------

_RED = "\033[31;1m"  # bold red
_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("---+" * board.size)

    lines: list[str] = [sep]
    for row in board.cells:
        cells: list[str] = []
        for marker in row:
            if marker == EMPTY:
                cells.append(f"{_DIM} · {_R}")
            elif marker == GOAL_MARKER:
                cells.append(f"{_RED} {marker} {_R}")
            else:
                cells.append(f" {marker} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- public entry point -------------------------------------------------------


def run(puzzle: Puzzle, delay: float = DEFAULT_DELAY, limit: int | None = None) -> int:
    """Solve *puzzle* and animate the solution.

    Returns the number of moves, or -1 if the puzzle has no solution.
    """
    solver = Solver.for_puzzle(puzzle, limit=limit)
    path = solver.solve()
    size = puzzle.size

    if not path:
        print(f"  {_Y}No solution for {puzzle.name!r}.{_R}")
        print(f"  {_DIM}Explored {solver.stats.discovered} states.{_R}")
        return -1

    moves = describe_moves(path)
    for i, state in enumerate(path):
        _clear()
        print(f"  {_C}=== Unblock: {puzzle.name} ({size}×{size}) ==={_R}")
        print()
        print(_render_board(state.render()))
        print()
        if i == 0:
            print(f"  Start  {_DIM}(target x={puzzle.target[0]}, y={puzzle.target[1]}){_R}")
        else:
            print(f"  Move {i}/{len(moves)}  ({moves[i - 1]})")
        sys.stdout.flush()
        time.sleep(delay)

    print(f"\n  {_G}Moves: {len(moves)}{_R}")
    print(
        f"  {_DIM}Explored {solver.stats.discovered} states "
        f"in {solver.stats.elapsed:.2f}s.{_R}"
    )
    return len(moves)
