"""Piece movement, drawing and ordering."""

from __future__ import annotations

import pytest

from unblock.exceptions import InvariantViolation, PieceOutOfBoundsError, PieceOverlapError
from unblock.models.board import Board
from unblock.models.piece import Orientation, Piece
from unblock.models.state import State

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


# -- helpers ------------------------------------------------------------------


def _board(*pieces: Piece, size: int = 6) -> Board:
    return State.from_pieces(pieces, size=size).render()


# -- movement range -----------------------------------------------------------


@pytest.mark.parametrize(
    ("piece", "expected"),
    [
        (Piece(0, 2, 2, H), (0, 4)),
        (Piece(2, 2, 2, H), (-2, 2)),
        (Piece(4, 5, 2, H), (-4, 0)),
        (Piece(3, 0, 2, V), (0, 4)),
        (Piece(1, 3, 2, V), (-3, 1)),
    ],
    ids=["left-edge", "middle", "right-edge", "top-edge", "vertical-middle"],
)
def test_movement_range_on_empty_board(piece: Piece, expected: tuple[int, int]) -> None:
    assert piece.movement_range(_board(piece)) == expected


def test_movement_range_stops_at_other_pieces() -> None:
    goal = Piece(1, 2, 2, H)
    blocker = Piece(4, 1, 2, V)
    board = _board(goal, blocker)

    assert goal.movement_range(board) == (-1, 1)
    assert blocker.movement_range(board) == (-1, 3)


def test_movement_range_boxed_in() -> None:
    piece = Piece(1, 0, 2, H)
    board = _board(piece, Piece(0, 0, 2, V), Piece(3, 0, 2, V), size=4)

    assert piece.movement_range(board) == (0, 0)


def test_movement_range_limit() -> None:
    piece = Piece(2, 2, 2, H)
    board = _board(piece)

    assert piece.movement_range(board, limit=1) == (-1, 1)
    assert piece.movement_range(board, limit=3) == (-2, 2)


# -- move ---------------------------------------------------------------------


def test_move_translates_along_axis() -> None:
    horizontal = Piece(1, 2, 2, H)
    vertical = Piece(3, 0, 2, V)

    assert horizontal.move(2) == Piece(3, 2, 2, H)
    assert horizontal.move(-1) == Piece(0, 2, 2, H)
    assert vertical.move(3) == Piece(3, 3, 2, V)
    # Pieces are values; the original is untouched.
    assert horizontal == Piece(1, 2, 2, H)


# -- drawing ------------------------------------------------------------------


def test_draw_marks_footprint() -> None:
    board = Board.blank(4)
    Piece(1, 1, 2, V).draw(board, "B")

    assert board.rows() == ["....", ".B..", ".B..", "...."]


def test_draw_over_occupied_cell_is_a_fault() -> None:
    board = Board.blank(4)
    Piece(0, 0, 2, H).draw(board, "*")

    with pytest.raises(PieceOverlapError) as excinfo:
        Piece(1, 0, 2, V).draw(board, "B")

    err = excinfo.value
    assert err.cell == (1, 0)
    assert err.found == "*"
    assert "**.." in err.board
    assert isinstance(err, InvariantViolation)


@pytest.mark.parametrize(
    ("piece", "cell"),
    [
        (Piece(3, 0, 2, H), (4, 0)),
        (Piece(0, 3, 2, V), (0, 4)),
        (Piece(-1, 0, 2, H), (-1, 0)),
    ],
    ids=["right", "bottom", "negative"],
)
def test_draw_outside_board_is_a_fault(piece: Piece, cell: tuple[int, int]) -> None:
    with pytest.raises(PieceOutOfBoundsError) as excinfo:
        piece.draw(Board.blank(4), "B")

    assert excinfo.value.cell == cell


# -- value semantics ----------------------------------------------------------


def test_equality_and_hash_are_structural() -> None:
    a = Piece(1, 2, 2, H)
    b = Piece(1, 2, 2, "horizontal")

    assert a == b
    assert hash(a) == hash(b)
    assert a != Piece(1, 2, 2, V)
    assert len({a, b, Piece(1, 2, 2, V)}) == 2


def test_sort_key_is_row_then_column() -> None:
    pieces = [Piece(4, 1), Piece(0, 4, 2, V), Piece(3, 0, 2, V), Piece(1, 1)]

    ordered = sorted(pieces, key=lambda p: p.sort_key)

    assert ordered == [Piece(3, 0, 2, V), Piece(1, 1), Piece(4, 1), Piece(0, 4, 2, V)]


def test_str() -> None:
    assert str(Piece(0, 2, 2, H)) == "Piece(x=0, y=2, size=2, orient=horizontal)"
