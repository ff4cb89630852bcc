"""Shortest-path solver for Unblock Me style sliding-block puzzles."""

from unblock.engine.solver import Solver, solve
from unblock.models import Orientation, Piece, Puzzle, State

__all__ = ["Orientation", "Piece", "Puzzle", "Solver", "State", "solve"]
__version__ = "0.1.0"
