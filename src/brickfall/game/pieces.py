from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List

import numpy as np


class BrickType(IntEnum):
    """Piece types. The value doubles as the color id written into the board."""

    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _states(*rows_per_state: List[List[int]]) -> List[Shape]:
    states = []
    for rows in rows_per_state:
        arr = np.array(rows, dtype=np.int8)
        arr.flags.writeable = False
        states.append(arr)
    return states


# Rotation states in the order a forward rotation walks them.
_CATALOG: Dict[BrickType, List[Shape]] = {
    BrickType.I: _states(
        [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]],
    ),
    BrickType.J: _states(
        [[0, 0, 0, 0], [2, 2, 2, 0], [0, 0, 2, 0], [0, 0, 0, 0]],
        [[0, 0, 0, 0], [0, 2, 2, 0], [0, 2, 0, 0], [0, 2, 0, 0]],
        [[0, 0, 0, 0], [0, 2, 0, 0], [0, 2, 2, 2], [0, 0, 0, 0]],
        [[0, 0, 2, 0], [0, 0, 2, 0], [0, 2, 2, 0], [0, 0, 0, 0]],
    ),
    BrickType.L: _states(
        [[0, 0, 0, 0], [0, 3, 3, 3], [0, 3, 0, 0], [0, 0, 0, 0]],
        [[0, 3, 0, 0], [0, 3, 0, 0], [0, 3, 3, 0], [0, 0, 0, 0]],
        [[0, 0, 0, 0], [0, 0, 3, 0], [3, 3, 3, 0], [0, 0, 0, 0]],
        [[0, 0, 0, 0], [0, 3, 3, 0], [0, 0, 3, 0], [0, 0, 3, 0]],
    ),
    BrickType.O: _states(
        [[0, 0, 0, 0], [0, 4, 4, 0], [0, 4, 4, 0], [0, 0, 0, 0]],
    ),
    BrickType.S: _states(
        [[0, 0, 0, 0], [0, 5, 5, 0], [5, 5, 0, 0], [0, 0, 0, 0]],
        [[5, 0, 0, 0], [5, 5, 0, 0], [0, 5, 0, 0], [0, 0, 0, 0]],
    ),
    BrickType.T: _states(
        [[0, 0, 0, 0], [6, 6, 6, 0], [0, 6, 0, 0], [0, 0, 0, 0]],
        [[0, 6, 0, 0], [0, 6, 6, 0], [0, 6, 0, 0], [0, 0, 0, 0]],
        [[0, 6, 0, 0], [6, 6, 6, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
        [[0, 6, 0, 0], [6, 6, 0, 0], [0, 6, 0, 0], [0, 0, 0, 0]],
    ),
    BrickType.Z: _states(
        [[0, 0, 0, 0], [7, 7, 0, 0], [0, 7, 7, 0], [0, 0, 0, 0]],
        [[0, 7, 0, 0], [7, 7, 0, 0], [7, 0, 0, 0], [0, 0, 0, 0]],
    ),
}


def rotations_for(kind: BrickType) -> List[Shape]:
    """Return writable copies of every rotation state of ``kind``."""
    return [state.copy() for state in _CATALOG[BrickType(kind)]]


@dataclass
class Brick:
    kind: BrickType
    shapes: List[Shape] = field(default_factory=list)

    @classmethod
    def of(cls, kind: BrickType) -> "Brick":
        return cls(kind=BrickType(kind), shapes=rotations_for(kind))

    @property
    def color(self) -> int:
        return int(self.kind)

    def shape_matrix(self) -> List[Shape]:
        # Callers get their own arrays; the brick's list stays untouched.
        return [s.copy() for s in self.shapes]
