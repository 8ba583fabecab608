"""Replay log of explored moves, for animating a search."""

from typing import Iterable, Iterator, List, Optional, Tuple
import numpy as np

from ..game.board import Board
from ..game.types import MoveStep


class ReplayLog:
    """Ordered record of every trial move (forward and reverse) of one search.

    Iterating the log always starts from the first step, so the same log
    can be replayed any number of times.
    """

    def __init__(self, steps: Optional[Iterable[MoveStep]] = None):
        self._steps: List[MoveStep] = list(steps) if steps is not None else []

    def append(self, step: MoveStep):
        self._steps.append(step)

    def clear(self):
        self._steps.clear()

    def boards(self, board: Board) -> Iterator[Tuple[MoveStep, Board]]:
        """Apply each step to a copy of `board` and yield it after every step.

        The live board is never touched. The same working copy is yielded
        each time, so callers should render or copy it before advancing.
        """
        working = board.copy()
        for step in self._steps:
            working.move_raw(step.source, step.destination)
            yield step, working

    def frames(self, board: Board) -> Iterator[Tuple[MoveStep, np.ndarray]]:
        """Board planes after every step, one channel per player."""
        for step, working in self.boards(board):
            yield step, working.to_numpy_array()

    def to_array(self) -> np.ndarray:
        """Steps as rows of (source x, source y, destination x, destination y, player)."""
        if not self._steps:
            return np.zeros((0, 5), dtype=np.int32)
        return np.array(
            [(s.source.x, s.source.y, s.destination.x, s.destination.y, int(s.player))
             for s in self._steps],
            dtype=np.int32,
        )

    def __iter__(self) -> Iterator[MoveStep]:
        return iter(list(self._steps))

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> MoveStep:
        return self._steps[index]

    def __repr__(self) -> str:
        return f"ReplayLog(steps={len(self._steps)})"
