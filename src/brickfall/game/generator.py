from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterable, List, Optional

from .pieces import Brick, BrickType


class BrickGenerator(ABC):
    """Source of bricks with a one-piece lookahead."""

    @abstractmethod
    def current_piece(self) -> Brick:
        """Advance the sequence and return the brick to spawn now."""

    @abstractmethod
    def next_piece(self) -> Brick:
        """Return the brick that follows the current one, without advancing."""


class RandomBrickGenerator(BrickGenerator):
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random(seed)
        self._queue: Deque[BrickType] = deque()
        self._fill()

    def _random_kind(self) -> BrickType:
        return self.rng.choice(list(BrickType))

    def _fill(self) -> None:
        while len(self._queue) < 2:
            self._queue.append(self._random_kind())

    def current_piece(self) -> Brick:
        kind = self._queue.popleft()
        self._fill()
        return Brick.of(kind)

    def next_piece(self) -> Brick:
        return Brick.of(self._queue[0])


class SequenceBrickGenerator(BrickGenerator):
    """Deterministic generator cycling through a fixed list of types."""

    def __init__(self, kinds: Iterable[BrickType]) -> None:
        self.kinds: List[BrickType] = [BrickType(k) for k in kinds]
        if not self.kinds:
            raise ValueError("SequenceBrickGenerator needs at least one brick type")
        self._position = 0

    def current_piece(self) -> Brick:
        kind = self.kinds[self._position]
        self._position = (self._position + 1) % len(self.kinds)
        return Brick.of(kind)

    def next_piece(self) -> Brick:
        return Brick.of(self.kinds[self._position])
