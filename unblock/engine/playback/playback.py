"""Turn solution paths into readable moves and replay moves on a state."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from unblock.exceptions import InvalidMoveError, PieceNotFoundError
from unblock.models.board import Direction, marker_for
from unblock.models.piece import Piece
from unblock.models.state import State

_AXIS = {
    Direction.LEFT: (True, -1),
    Direction.RIGHT: (True, 1),
    Direction.UP: (False, -1),
    Direction.DOWN: (False, 1),
}


@dataclass(frozen=True)
class Move:
    """A single slide: *piece* (as it stood before the move) travels *distance* cells."""

    piece: Piece
    direction: Direction
    distance: int
    label: str = ""

    @property
    def delta(self) -> int:
        return _AXIS[self.direction][1] * self.distance

    def __str__(self) -> str:
        return f"{self.label or '?'} {self.direction.value} {self.distance}"


def _direction_of(piece: Piece, delta: int) -> Direction:
    if piece.horizontal:
        return Direction.RIGHT if delta > 0 else Direction.LEFT
    return Direction.DOWN if delta > 0 else Direction.UP


def _delta_between(old: Piece, new: Piece) -> int:
    """Signed slide turning *old* into *new*, or 0 if *new* is not a slide of *old*."""
    if (old.size, old.orientation) != (new.size, new.orientation):
        return 0
    if old.horizontal and old.y == new.y:
        return new.x - old.x
    if not old.horizontal and old.x == new.x:
        return new.y - old.y
    return 0


def describe_move(before: State, after: State) -> Move:
    """Return the one slide that turns *before* into *after*.

    Non-goal pieces are matched as a multiset, so the result does not
    depend on how either state was canonicalized.
    """
    if before.size != after.size:
        raise InvalidMoveError("States are on boards of different sizes.")

    if before.goal != after.goal:
        if Counter(before.others) != Counter(after.others):
            raise InvalidMoveError("More than one piece moved.")
        index, old, new = 0, before.goal, after.goal
    else:
        removed = list((Counter(before.others) - Counter(after.others)).elements())
        added = list((Counter(after.others) - Counter(before.others)).elements())
        if len(removed) != 1 or len(added) != 1:
            raise InvalidMoveError(
                f"Expected exactly one piece to move, found {len(removed)}."
            )
        old, new = removed[0], added[0]
        index = before.pieces.index(old)

    delta = _delta_between(old, new)
    if delta == 0:
        raise InvalidMoveError(f"{old} cannot slide to {new}.")

    min_delta, max_delta = old.movement_range(before.render())
    if not min_delta <= delta <= max_delta:
        raise InvalidMoveError(f"{old} is blocked on its way to {new}.")

    return Move(
        piece=old,
        direction=_direction_of(old, delta),
        distance=abs(delta),
        label=marker_for(index),
    )


def describe_moves(path: list[State]) -> list[Move]:
    """Moves between each pair of consecutive states in *path*."""
    return [describe_move(a, b) for a, b in zip(path, path[1:])]


def apply_move(state: State, move: Move, limit: int | None = None) -> State:
    """Slide ``move.piece`` on *state* and return the canonical result.

    Raises ``PieceNotFoundError`` if the piece is not on the board and
    ``InvalidMoveError`` if the slide is off-axis, empty, or blocked.
    """
    if move.piece not in state.pieces:
        raise PieceNotFoundError(f"{move.piece} is not on the board.")
    index = state.pieces.index(move.piece)

    horizontal, _ = _AXIS[move.direction]
    if horizontal != move.piece.horizontal:
        raise InvalidMoveError(
            f"{move.piece} cannot move {move.direction.value}; "
            f"it is {move.piece.orientation.value}."
        )
    if move.distance < 1:
        raise InvalidMoveError(f"Distance must be positive, got {move.distance}.")

    min_delta, max_delta = move.piece.movement_range(state.render(), limit)
    if not min_delta <= move.delta <= max_delta:
        raise InvalidMoveError(
            f"{move.piece} cannot move {move.direction.value} by "
            f"{move.distance}; path blocked."
        )
    return state.with_moved(index, move.delta).canonicalize()
