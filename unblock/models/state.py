"""Search state: the goal piece plus every other piece on the board."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from unblock.models.board import DEFAULT_SIZE, Board, marker_for
from unblock.models.piece import Piece


@dataclass(frozen=True)
class State:
    """An arrangement of pieces on a ``size`` x ``size`` board.

    The goal piece is kept apart from the rest so that canonicalization
    never reorders it; ``pieces`` still lists it first. Two states are equal
    (and hash equal) when their board size, goal piece and remaining pieces
    match in order, so states should be canonicalized before they are
    compared.
    """

    goal: Piece
    others: tuple[Piece, ...] = ()
    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "others", tuple(self.others))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece], size: int = DEFAULT_SIZE) -> State:
        """Create a state from an ordered piece list whose first entry is the goal.

        Example::

            State.from_pieces([Piece(0, 2), Piece(3, 0, orientation="vertical")])
        """
        goal, *others = pieces
        return cls(goal=goal, others=tuple(others), size=size)

    # -- queries --------------------------------------------------------------

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return (self.goal, *self.others)

    def is_solved(self, target: tuple[int, int]) -> bool:
        return (self.goal.x, self.goal.y) == tuple(target)

    def render(self) -> Board:
        """Draw every piece into a fresh board, goal piece first."""
        board = Board.blank(self.size)
        for index, piece in enumerate(self.pieces):
            piece.draw(board, marker_for(index))
        return board

    # -- transitions ----------------------------------------------------------

    def canonicalize(self) -> State:
        """Return the state with the non-goal pieces sorted by ``(y, x)``."""
        ordered = tuple(sorted(self.others, key=lambda p: p.sort_key))
        if ordered == self.others:
            return self
        return replace(self, others=ordered)

    def with_moved(self, index: int, delta: int) -> State:
        """Return a copy with the piece at *index* of ``pieces`` moved by *delta*."""
        if index == 0:
            return replace(self, goal=self.goal.move(delta))
        others = list(self.others)
        others[index - 1] = others[index - 1].move(delta)
        return replace(self, others=tuple(others))

    def neighbors(self, limit: int | None = None) -> list[State]:
        """Every canonical state one slide away, duplicates included.

        Pieces are visited in ``pieces`` order and deltas in ascending order,
        so the result is deterministic.
        """
        board = self.render()
        result: list[State] = []
        for index, piece in enumerate(self.pieces):
            min_delta, max_delta = piece.movement_range(board, limit)
            for delta in range(min_delta, max_delta + 1):
                if delta != 0:
                    result.append(self.with_moved(index, delta).canonicalize())
        return result

    def __str__(self) -> str:
        return self.render().to_string()
