"""A rectangular block that slides along one axis."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from unblock.exceptions import PieceOutOfBoundsError, PieceOverlapError
from unblock.models.board import EMPTY, Board

PIECE_SIZE = 2


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Piece:
    """A piece anchored at its top-left cell ``(x, y)``.

    It covers ``size`` contiguous cells to the right (horizontal) or
    downwards (vertical). Pieces are values: moving one returns a new piece.
    """

    x: int
    y: int
    size: int = PIECE_SIZE
    orientation: Orientation = Orientation.HORIZONTAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "orientation", Orientation(self.orientation))

    @property
    def horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.y, self.x

    def cells(self) -> list[tuple[int, int]]:
        if self.horizontal:
            return [(self.x + i, self.y) for i in range(self.size)]
        return [(self.x, self.y + i) for i in range(self.size)]

    # -- movement -------------------------------------------------------------

    def movement_range(self, board: Board, limit: int | None = None) -> tuple[int, int]:
        """Return the inclusive ``(min_delta, max_delta)`` this piece may slide.

        *board* must be a render of the state that owns this piece (so the
        piece's own cells are occupied). Each direction counts the empty
        cells next to the footprint up to the board edge or the first
        occupied cell, capped at *limit* when given.
        """
        dx, dy = (1, 0) if self.horizontal else (0, 1)

        min_delta = 0
        cx, cy = self.x - dx, self.y - dy
        while (limit is None or -min_delta < limit) and board.is_empty(cx, cy):
            min_delta -= 1
            cx, cy = cx - dx, cy - dy

        max_delta = 0
        cx, cy = self.x + dx * self.size, self.y + dy * self.size
        while (limit is None or max_delta < limit) and board.is_empty(cx, cy):
            max_delta += 1
            cx, cy = cx + dx, cy + dy

        return min_delta, max_delta

    def move(self, delta: int) -> Piece:
        """Return this piece translated by *delta* along its axis."""
        if self.horizontal:
            return replace(self, x=self.x + delta)
        return replace(self, y=self.y + delta)

    # -- rendering ------------------------------------------------------------

    def draw(self, board: Board, marker: str) -> None:
        """Stamp the piece into *board*; overlapping or leaving it is a fault."""
        for x, y in self.cells():
            if not board.in_bounds(x, y):
                raise PieceOutOfBoundsError(self, (x, y), board.size)
            found = board.get(x, y)
            if found != EMPTY:
                raise PieceOverlapError(self, (x, y), found, board.to_string())
            board.set(x, y, marker)

    def __str__(self) -> str:
        return (
            f"Piece(x={self.x}, y={self.y}, size={self.size}, "
            f"orient={self.orientation.value})"
        )
