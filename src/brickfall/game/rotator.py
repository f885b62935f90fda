from __future__ import annotations

from typing import List, NamedTuple, Optional

import numpy as np

from .pieces import Brick, BrickType


class NextShape(NamedTuple):
    index: int
    shape: np.ndarray


class BrickRotator:
    """Rotation cursor over the active brick's own list of shapes."""

    def __init__(self) -> None:
        self._brick: Optional[Brick] = None
        self._shapes: List[np.ndarray] = []
        self._index = 0

    @property
    def has_piece(self) -> bool:
        return self._brick is not None

    @property
    def kind(self) -> Optional[BrickType]:
        return self._brick.kind if self._brick is not None else None

    @property
    def index(self) -> int:
        return self._index

    def set_piece(self, brick: Brick) -> None:
        self._brick = brick
        self._shapes = brick.shape_matrix()
        self._index = 0

    def current_shape(self) -> np.ndarray:
        return self._shapes[self._index]

    def peek_next(self) -> NextShape:
        index = (self._index + 1) % len(self._shapes)
        return NextShape(index, self._shapes[index])

    def commit(self, index: int) -> None:
        if not 0 <= index < len(self._shapes):
            raise IndexError(f"rotation index {index} out of range for {len(self._shapes)} states")
        self._index = index
