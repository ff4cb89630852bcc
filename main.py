#!/usr/bin/env python3
"""Unblock puzzle solver.

Usage::

    python main.py                          # solve the classic puzzle (Rich)
    python main.py -f vanilla -d 0.5        # plain terminal, faster playback
    python main.py -p puzzles/sample.json --name tiny
    python main.py --max-slide 1 -v        # one-cell moves, debug logging
"""

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from unblock.exceptions import InvalidPuzzleError, InvariantViolation
from unblock.frontend.cli import DEFAULT_DELAY
from unblock.models.puzzle import Puzzle

logger = logging.getLogger("unblock")

EXIT_NO_SOLUTION = 1
EXIT_INTERNAL_ERROR = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "unblock.frontend.cli.vanilla.app",
    Frontend.rich: "unblock.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load_puzzle(path: Optional[Path], name: Optional[str]) -> Puzzle:
    if path is None:
        return Puzzle.classic()
    try:
        return Puzzle.load(path, name=name)
    except InvalidPuzzleError as e:
        raise typer.BadParameter(str(e), param_hint="--puzzle") from e


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to play the solution back.",
    ),
    puzzle_path: Optional[Path] = typer.Option(
        None, "-p", "--puzzle",
        exists=True, dir_okay=False, readable=True,
        help="JSON puzzle file. Omit for the built-in classic puzzle.",
    ),
    name: Optional[str] = typer.Option(
        None, "--name",
        help="Puzzle to pick from a file holding several.",
    ),
    delay: float = typer.Option(
        DEFAULT_DELAY, "-d", "--delay",
        min=0.0,
        help="Seconds each frame stays on screen.",
    ),
    max_slide: Optional[int] = typer.Option(
        None, "--max-slide",
        min=1,
        help="Longest slide allowed in a single move (default: unlimited).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every expanded search state.",
    ),
) -> None:
    """Find and play back the shortest solution of an Unblock puzzle."""
    _configure_logging(verbose)
    puzzle = _load_puzzle(puzzle_path, name)
    logger.info("Solving %r (%dx%d, target %s)", puzzle.name, puzzle.size, puzzle.size, puzzle.target)

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        moves = mod.run(puzzle, delay=delay, limit=max_slide)
    except InvariantViolation as e:
        logger.critical("Internal error, search aborted: %s", e)
        raise typer.Exit(code=EXIT_INTERNAL_ERROR) from e

    if moves < 0:
        raise typer.Exit(code=EXIT_NO_SOLUTION)


if __name__ == "__main__":
    app()
