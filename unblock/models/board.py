"""Board geometry and the render buffer used for collision checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_SIZE = 6
MAX_SIZE = 26
EMPTY = "."
GOAL_MARKER = "*"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def marker_for(index: int) -> str:
    """Return the display marker of the piece at *index* in a state.

    The goal piece (index 0) is drawn as ``*``; every other piece gets a
    letter derived from its index (``B``, ``C``, ...).
    """
    if index == 0:
        return GOAL_MARKER
    return chr(ord("A") + index)


@dataclass
class Board:
    """A size x size character buffer.

    Cells are stored row-major as ``cells[y][x]``. ``EMPTY`` marks a free
    cell. Boards are scratch space: they are rebuilt from a state whenever
    they are needed and never stored as part of it.
    """

    size: int
    cells: list[list[str]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def blank(cls, size: int = DEFAULT_SIZE) -> Board:
        """Create a board with every cell empty."""
        return cls(size=size, cells=[[EMPTY] * size for _ in range(size)])

    # -- queries --------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> str:
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[y][x] == EMPTY

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.cells]

    def to_string(self) -> str:
        return "".join(row + "\n" for row in self.rows())

    def __str__(self) -> str:
        return self.to_string()

    # -- mutation -------------------------------------------------------------

    def set(self, x: int, y: int, marker: str) -> None:
        self.cells[y][x] = marker
