"""Puzzle definitions: start layout, board size and target cell."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from unblock.exceptions import InvalidPuzzleError, InvariantViolation
from unblock.models.board import DEFAULT_SIZE, MAX_SIZE
from unblock.models.piece import PIECE_SIZE, Orientation, Piece
from unblock.models.state import State

logger = logging.getLogger(__name__)

_ORIENTATIONS: dict[str, Orientation] = {
    "h": Orientation.HORIZONTAL,
    "horiz": Orientation.HORIZONTAL,
    "horizontal": Orientation.HORIZONTAL,
    "v": Orientation.VERTICAL,
    "vert": Orientation.VERTICAL,
    "vertical": Orientation.VERTICAL,
}


@dataclass(frozen=True)
class Puzzle:
    """A start state together with the cell the goal piece must reach."""

    name: str
    start: State
    target: tuple[int, int]

    @property
    def size(self) -> int:
        return self.start.size

    # -- construction helpers -------------------------------------------------

    @classmethod
    def classic(cls) -> Puzzle:
        """The 6x6 layout the solver ships with; the goal piece exits right."""
        h, v = Orientation.HORIZONTAL, Orientation.VERTICAL
        start = State.from_pieces(
            [
                Piece(0, 2, 2, h),
                Piece(3, 0, 2, v),
                Piece(4, 0, 2, h),
                Piece(4, 1, 2, h),
                Piece(3, 2, 2, v),
                Piece(0, 4, 2, v),
                Piece(1, 4, 2, v),
                Piece(3, 4, 2, h),
                Piece(5, 3, 2, v),
            ],
            size=DEFAULT_SIZE,
        )
        return cls(name="classic", start=start, target=(4, 2))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Puzzle:
        """Create a validated puzzle from its JSON representation.

        Example::

            Puzzle.from_dict({
                "name": "tiny",
                "size": 4,
                "target": [2, 0],
                "goal": {"x": 0, "y": 0, "orientation": "horizontal"},
                "pieces": [{"x": 2, "y": 1, "orientation": "vertical"}],
            })
        """
        if not isinstance(data, dict):
            raise InvalidPuzzleError(f"Expected a puzzle object, got {type(data).__name__}.")
        try:
            size = int(data.get("size", DEFAULT_SIZE))
            tx, ty = (int(v) for v in data["target"])
            goal = _piece_from_dict(data["goal"])
            others = [_piece_from_dict(p) for p in data.get("pieces", [])]
        except InvalidPuzzleError:
            raise
        except (AttributeError, KeyError, OverflowError, TypeError, ValueError) as e:
            raise InvalidPuzzleError(f"Malformed puzzle definition: {e!r}") from e

        puzzle = cls(
            name=str(data.get("name", "unnamed")),
            start=State(goal=goal, others=tuple(others), size=size),
            target=(tx, ty),
        )
        puzzle.validate()
        return puzzle

    @classmethod
    def load_all(cls, filepath: Path) -> dict[str, Puzzle]:
        """Load every puzzle in a JSON file (one object or a list of them)."""
        try:
            data = json.loads(Path(filepath).read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidPuzzleError(f"{filepath} is not valid JSON: {e}") from e

        entries = data if isinstance(data, list) else [data]
        puzzles: dict[str, Puzzle] = {}
        for entry in entries:
            puzzle = cls.from_dict(entry)
            puzzles[puzzle.name] = puzzle
        logger.debug("Loaded %d puzzle(s) from %s", len(puzzles), filepath)
        return puzzles

    @classmethod
    def load(cls, filepath: Path, name: str | None = None) -> Puzzle:
        """Load one puzzle from a JSON file, selecting by *name* if given."""
        puzzles = cls.load_all(filepath)
        if not puzzles:
            raise InvalidPuzzleError(f"{filepath} contains no puzzles.")
        if name is None:
            return next(iter(puzzles.values()))
        if name not in puzzles:
            raise InvalidPuzzleError(
                f"No puzzle named {name!r} in {filepath} "
                f"(available: {', '.join(puzzles)})."
            )
        return puzzles[name]

    # -- validation -----------------------------------------------------------

    def validate(self) -> None:
        """Reject layouts the solver cannot work with."""
        size = self.size
        if not 2 <= size <= MAX_SIZE:
            raise InvalidPuzzleError(
                f"Board size must be between 2 and {MAX_SIZE}, got {size}."
            )

        for piece in self.start.pieces:
            if piece.size != PIECE_SIZE:
                raise InvalidPuzzleError(
                    f"{piece} has size {piece.size}; pieces span {PIECE_SIZE} cells."
                )

        try:
            self.start.render()
        except InvariantViolation as e:
            raise InvalidPuzzleError(f"Invalid start layout: {e}") from e

        tx, ty = self.target
        goal = self.start.goal
        if goal.horizontal:
            reachable = ty == goal.y and 0 <= tx <= size - goal.size
        else:
            reachable = tx == goal.x and 0 <= ty <= size - goal.size
        if not reachable:
            raise InvalidPuzzleError(
                f"Target ({tx}, {ty}) is not on the axis of goal piece {goal}."
            )


def _piece_from_dict(data: dict[str, Any]) -> Piece:
    raw = str(data.get("orientation", data.get("orient", "horizontal"))).lower()
    if raw not in _ORIENTATIONS:
        raise InvalidPuzzleError(f"Unknown orientation {raw!r}.")
    return Piece(
        x=int(data["x"]),
        y=int(data["y"]),
        size=int(data.get("size", PIECE_SIZE)),
        orientation=_ORIENTATIONS[raw],
    )
