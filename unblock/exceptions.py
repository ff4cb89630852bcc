"""Exception hierarchy for the Unblock solver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unblock.models.piece import Piece
    from unblock.models.state import State


class UnblockError(Exception):
    """Base exception class for Unblock errors."""


# -- internal faults ----------------------------------------------------------


class InvariantViolation(UnblockError, RuntimeError):
    """An internal invariant was broken.

    These signal a bug in the solver, not bad input, and are never
    recovered locally.
    """


class PieceOverlapError(InvariantViolation):
    """Raised when a piece is drawn over a cell that is already occupied."""

    def __init__(self, piece: Piece, cell: tuple[int, int], found: str, board: str) -> None:
        self.piece = piece
        self.cell = cell
        self.found = found
        self.board = board
        x, y = cell
        super().__init__(
            f"Clash at coordinates x={x}, y={y} when drawing {piece}, "
            f"found: {found}\nCurrent state of board:\n{board}"
        )


class PieceOutOfBoundsError(InvariantViolation):
    """Raised when a piece reaches outside the grid."""

    def __init__(self, piece: Piece, cell: tuple[int, int], size: int) -> None:
        self.piece = piece
        self.cell = cell
        self.size = size
        x, y = cell
        super().__init__(
            f"{piece} leaves the {size}x{size} board at x={x}, y={y}"
        )


class MissingBackpointerError(InvariantViolation):
    """Raised when the path trace reaches a state the search never recorded."""

    def __init__(self, state: State) -> None:
        self.state = state
        super().__init__(f"No backpointer recorded for state:\n{state}")


# -- user-level errors --------------------------------------------------------


class InvalidPuzzleError(UnblockError, ValueError):
    """Raised when a puzzle definition is malformed."""


class InvalidMoveError(UnblockError):
    """Raised when an invalid move is attempted."""


class PieceNotFoundError(UnblockError):
    """Raised when a move names a piece that is not on the board."""
