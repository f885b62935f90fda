"""Pure grid operations on numpy boards.

Every function here leaves its inputs untouched and returns new arrays, so a
board published to observers is never modified behind their back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .rules import ScoringRules

SCORE_PER_LINE = 50


@dataclass
class ClearRow:
    lines_removed: int
    new_matrix: np.ndarray
    score_bonus: int


def _require_2d(m: np.ndarray, name: str) -> None:
    if np.ndim(m) != 2:
        raise ValueError(f"{name} must be a 2-D matrix, got shape {np.shape(m)}")


def empty(rows: int, columns: int) -> np.ndarray:
    return np.zeros((rows, columns), dtype=np.int8)


def copy(m: np.ndarray) -> np.ndarray:
    return np.array(m, copy=True)


def deep_copy_list(matrices: Iterable[np.ndarray]) -> List[np.ndarray]:
    return [copy(m) for m in matrices]


def intersects(matrix: np.ndarray, shape: np.ndarray, x: int, y: int) -> bool:
    """True if ``shape`` placed with its top-left at column ``x``, row ``y``
    leaves the board or lands on an occupied cell."""
    _require_2d(matrix, "matrix")
    _require_2d(shape, "shape")
    rows, columns = matrix.shape
    for i, j in np.argwhere(shape != 0):
        target_row = y + int(i)
        target_col = x + int(j)
        if not (0 <= target_row < rows and 0 <= target_col < columns):
            return True
        if matrix[target_row, target_col] != 0:
            return True
    return False


def merge(matrix: np.ndarray, shape: np.ndarray, x: int, y: int) -> np.ndarray:
    _require_2d(matrix, "matrix")
    _require_2d(shape, "shape")
    merged = copy(matrix).astype(np.result_type(matrix, shape), copy=False)
    rows, columns = merged.shape
    for i, j in np.argwhere(shape != 0):
        target_row = y + int(i)
        target_col = x + int(j)
        # Out-of-board cells are dropped; callers check intersects first.
        if 0 <= target_row < rows and 0 <= target_col < columns:
            merged[target_row, target_col] = shape[i, j]
    return merged


def clear_full_rows(matrix: np.ndarray, score_per_line: int = SCORE_PER_LINE) -> ClearRow:
    _require_2d(matrix, "matrix")
    full_rows = np.where(np.all(matrix != 0, axis=1))[0]
    if full_rows.size == 0:
        return ClearRow(lines_removed=0, new_matrix=copy(matrix), score_bonus=0)
    num = int(full_rows.size)
    # Remove full rows and add empty rows at the top
    remaining = np.delete(copy(matrix), full_rows, axis=0)
    new_rows = np.zeros((num, matrix.shape[1]), dtype=remaining.dtype)
    cleared = np.vstack((new_rows, remaining))
    bonus = ScoringRules(score_per_line=score_per_line).score_for_lines(num)
    return ClearRow(lines_removed=num, new_matrix=cleared, score_bonus=bonus)
