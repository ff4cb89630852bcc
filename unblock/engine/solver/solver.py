"""Breadth-first search for the shortest solution of an Unblock puzzle."""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import NamedTuple

from unblock.exceptions import MissingBackpointerError
from unblock.models.puzzle import Puzzle
from unblock.models.state import State

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    discovered: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0


class FrontierEntry(NamedTuple):
    state: State
    moves: int


class Solver:
    """One breadth-first search session.

    The frontier and the backpointer map belong to the instance and are
    filled by a single call to :meth:`solve`; create a new solver for every
    search. Every edge costs one move and each state is recorded exactly
    once, when first discovered, so the first dequeued state with the goal
    piece on the target is reached by a shortest path.
    """

    def __init__(
        self,
        start: State,
        target: tuple[int, int],
        limit: int | None = None,
    ) -> None:
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}.")
        self.start = start
        self.target = (target[0], target[1])
        self.limit = limit
        self.stats = SearchStats()
        self._frontier: deque[FrontierEntry] = deque()
        self._prev_state: dict[State, State | None] = {}
        self._used = False

    @classmethod
    def for_puzzle(cls, puzzle: Puzzle, limit: int | None = None) -> Solver:
        return cls(puzzle.start, puzzle.target, limit=limit)

    # -- search ---------------------------------------------------------------

    def solve(self) -> list[State]:
        """Return the states from start to goal inclusive, or ``[]`` if unsolvable."""
        if self._used:
            raise RuntimeError("Solver.solve() may only run once per instance.")
        self._used = True

        t0 = time.perf_counter()
        self._frontier.append(FrontierEntry(self.start, 0))
        self._prev_state[self.start] = None
        # A non-canonical start is also seen under its canonical form; the
        # alias is never enqueued, so paths still begin with the caller's start.
        canonical_start = self.start.canonicalize()
        aliases = 0
        if canonical_start != self.start:
            self._prev_state[canonical_start] = None
            aliases = 1
        try:
            while self._frontier:
                self.stats.max_frontier = max(self.stats.max_frontier, len(self._frontier))
                state, moves = self._frontier.popleft()
                self.stats.expanded += 1
                logger.debug("This state is achievable in %d moves:\n%s", moves, state)

                if state.is_solved(self.target):
                    path = self.trace_path_to(state)
                    logger.info(
                        "Solved in %d moves (%d states expanded, %d discovered)",
                        moves, self.stats.expanded, len(self._prev_state) - aliases,
                    )
                    return path

                for neighbor in state.neighbors(self.limit):
                    self.stats.generated += 1
                    if neighbor not in self._prev_state:
                        self._prev_state[neighbor] = state
                        self._frontier.append(FrontierEntry(neighbor, moves + 1))

            logger.info(
                "No solution: search space exhausted after %d states",
                len(self._prev_state) - aliases,
            )
            return []
        finally:
            self.stats.discovered = len(self._prev_state) - aliases
            self.stats.elapsed = time.perf_counter() - t0

    def trace_path_to(self, final_state: State) -> list[State]:
        """Follow backpointers from *final_state* back to the start."""
        sequence: list[State] = []
        state: State | None = final_state
        while state is not None:
            sequence.append(state)
            if state not in self._prev_state:
                raise MissingBackpointerError(state)
            state = self._prev_state[state]
        sequence.reverse()
        return sequence


def solve(
    start: State,
    target_x: int,
    target_y: int,
    limit: int | None = None,
) -> list[State]:
    """Shortest path from *start* to a state with the goal piece at the target.

    Returns ``[]`` when the target cannot be reached and ``[start]`` when the
    goal piece already sits on it.
    """
    return Solver(start, (target_x, target_y), limit=limit).solve()
