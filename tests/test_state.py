"""State rendering, canonical form and neighbor generation."""

from __future__ import annotations

import pytest

from unblock.exceptions import PieceOverlapError
from unblock.models.piece import Orientation, Piece
from unblock.models.puzzle import Puzzle
from unblock.models.state import State

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL

CLASSIC_ROWS = [
    "...BCC",
    "...BDD",
    "**.E..",
    "...E.I",
    "FG.HHI",
    "FG....",
]


@pytest.fixture
def classic() -> State:
    return Puzzle.classic().start


@pytest.fixture
def tiny() -> State:
    """4x4: goal piece at (0, 0) with a vertical blocker right next to it."""
    return State.from_pieces([Piece(0, 0, 2, H), Piece(2, 0, 2, V)], size=4)


# -- rendering ----------------------------------------------------------------


def test_render_marks_goal_and_letters(classic: State) -> None:
    assert classic.render().rows() == CLASSIC_ROWS
    assert str(classic) == "\n".join(CLASSIC_ROWS) + "\n"


def test_render_overlap_is_a_fault() -> None:
    state = State.from_pieces([Piece(0, 0, 2, H), Piece(1, 0, 2, V)], size=4)

    with pytest.raises(PieceOverlapError):
        state.render()


def test_pieces_lists_goal_first(classic: State) -> None:
    assert classic.pieces[0] == classic.goal == Piece(0, 2, 2, H)
    assert classic.pieces[1:] == classic.others


# -- canonical form -----------------------------------------------------------


def test_canonicalize_sorts_others_by_row_then_column(classic: State) -> None:
    canonical = classic.canonicalize()

    assert canonical != classic
    assert canonical.goal == classic.goal
    assert [p.sort_key for p in canonical.others] == sorted(p.sort_key for p in classic.others)


def test_canonicalize_is_idempotent(classic: State) -> None:
    once = classic.canonicalize()

    assert once.canonicalize() == once
    assert once.canonicalize() is once


def test_permuted_pieces_share_one_canonical_state() -> None:
    goal = Piece(5, 4, 2, V)
    a, b, c = Piece(0, 0, 2, H), Piece(3, 1, 2, V), Piece(0, 5, 2, H)

    first = State.from_pieces([goal, a, b, c]).canonicalize()
    second = State.from_pieces([goal, c, a, b]).canonicalize()

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    # The goal piece is never sorted in with the rest.
    assert first.goal == goal
    assert goal not in first.others


def test_others_given_as_list_are_stored_as_tuple() -> None:
    goal, blocker = Piece(0, 0, 2, H), Piece(2, 0, 2, V)

    state = State(goal=goal, others=[blocker], size=4)

    assert state.others == (blocker,)
    assert state == State(goal=goal, others=(blocker,), size=4)
    assert {state: None}


def test_is_solved(tiny: State) -> None:
    assert tiny.is_solved((0, 0))
    assert not tiny.is_solved((2, 0))


# -- neighbors ----------------------------------------------------------------


def test_neighbors_enumerate_every_slide_in_order(tiny: State) -> None:
    goal = Piece(0, 0, 2, H)

    assert tiny.neighbors() == [
        State(goal=goal, others=(Piece(2, 1, 2, V),), size=4),
        State(goal=goal, others=(Piece(2, 2, 2, V),), size=4),
    ]


def test_neighbors_respect_limit(tiny: State) -> None:
    assert tiny.neighbors(limit=1) == [
        State(goal=Piece(0, 0, 2, H), others=(Piece(2, 1, 2, V),), size=4),
    ]


def test_neighbors_never_overlap_and_are_canonical(classic: State) -> None:
    frontier = [classic]
    for _ in range(3):
        layer: list[State] = []
        for state in frontier:
            for neighbor in state.neighbors():
                neighbor.render()
                assert neighbor.canonicalize() == neighbor
                layer.append(neighbor)
        frontier = layer
    assert frontier


def test_neighbors_are_deterministic(classic: State) -> None:
    assert classic.neighbors() == classic.neighbors()


def test_neighbors_move_exactly_one_piece(classic: State) -> None:
    before = set(classic.pieces)
    for neighbor in classic.neighbors():
        after = set(neighbor.pieces)
        assert len(before - after) == 1
        assert len(after - before) == 1
