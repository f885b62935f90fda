from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import yaml

from . import matrix
from .generator import BrickGenerator, RandomBrickGenerator
from .matrix import ClearRow
from .observable import Observable
from .rotator import BrickRotator
from .rules import Score, ScoringRules

logger = logging.getLogger(__name__)


class EventSource(Enum):
    USER = "user"
    THREAD = "thread"


class GameStatus(Enum):
    ACTIVE = "active"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    rows: int = 25
    columns: int = 10
    hidden_buffer_rows: int = 2
    tick_ms: int = 400
    score_per_line: int = 50
    manual_down_score: int = 1
    spawn_x: int = 4
    spawn_y: int = 0
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError(f"board must have positive size, got {self.rows}x{self.columns}")
        if not 0 <= self.hidden_buffer_rows < self.rows:
            raise ValueError(f"hidden_buffer_rows must be in [0, {self.rows}), got {self.hidden_buffer_rows}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.score_per_line < 0 or self.manual_down_score < 0:
            raise ValueError("score constants must be non-negative")

    @property
    def visible_rows(self) -> int:
        return self.rows - self.hidden_buffer_rows

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "GameConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at top level")
        return cls.from_dict(data)


@dataclass
class ViewData:
    brick_data: np.ndarray
    x: int
    y: int
    next_brick_data: np.ndarray


def _read_only(m: np.ndarray) -> np.ndarray:
    view = m.view()
    view.flags.writeable = False
    return view


class BrickGame:
    """Board, falling brick and score of one game.

    Nothing is spawned at construction; call :meth:`spawn_next_piece` or
    :meth:`new_game` before moving. Board, score and game-over changes are
    pushed to the ``*_property`` observables right after they happen.
    """

    def __init__(self, config: Optional[GameConfig] = None, generator: Optional[BrickGenerator] = None) -> None:
        self.config = config or GameConfig()
        self.rules = ScoringRules(
            score_per_line=self.config.score_per_line,
            manual_down_score=self.config.manual_down_score,
        )
        self.generator = generator or RandomBrickGenerator(seed=self.config.random_seed)
        self.rotator = BrickRotator()
        self._background = matrix.empty(self.config.rows, self.config.columns)
        self._offset: Optional[Tuple[int, int]] = None
        self._score = Score()
        self.game_over_property: Observable[bool] = Observable(False)
        self.board_matrix_property: Observable[np.ndarray] = Observable(
            _read_only(self._background), eq=operator.is_
        )

    # Observable state

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def board_matrix(self) -> np.ndarray:
        return matrix.copy(self._background)

    @property
    def score(self) -> int:
        return self._score.value

    @property
    def score_property(self) -> Observable[int]:
        return self._score.property

    @property
    def game_over(self) -> bool:
        return self.game_over_property.value

    @property
    def state(self) -> GameStatus:
        return GameStatus.GAME_OVER if self.game_over else GameStatus.ACTIVE

    @property
    def offset(self) -> Optional[Tuple[int, int]]:
        return self._offset

    def view_data(self) -> Optional[ViewData]:
        if self._offset is None:
            return None
        x, y = self._offset
        return ViewData(
            brick_data=matrix.copy(self.rotator.current_shape()),
            x=x,
            y=y,
            next_brick_data=self.generator.next_piece().shape_matrix()[0],
        )

    def _publish_board(self) -> None:
        self.board_matrix_property.set(_read_only(self._background))

    # Commands

    def move(self, dx: int, dy: int) -> bool:
        if self._offset is None:
            return False
        new_x = self._offset[0] + dx
        new_y = self._offset[1] + dy
        if matrix.intersects(self._background, self.rotator.current_shape(), new_x, new_y):
            return False
        self._offset = (new_x, new_y)
        return True

    def move_left(self) -> bool:
        return self.move(-1, 0)

    def move_right(self) -> bool:
        return self.move(1, 0)

    def move_down(self, source: EventSource = EventSource.THREAD) -> bool:
        moved = self.move(0, 1)
        if moved and source is EventSource.USER:
            self._score.add(self.rules.manual_down_score)
        return moved

    def rotate(self) -> bool:
        if self._offset is None:
            return False
        candidate = self.rotator.peek_next()
        x, y = self._offset
        if matrix.intersects(self._background, candidate.shape, x, y):
            return False
        self.rotator.commit(candidate.index)
        return True

    def spawn_next_piece(self) -> bool:
        """Spawn the next brick. Returns True when it cannot fit (game over)."""
        brick = self.generator.current_piece()
        self.rotator.set_piece(brick)
        self._offset = (self.config.spawn_x, self.config.spawn_y)
        conflict = matrix.intersects(
            self._background, self.rotator.current_shape(), self.config.spawn_x, self.config.spawn_y
        )
        logger.debug("spawned %s at %s", brick.kind.name, self._offset)
        if conflict:
            logger.info("game over: %s blocked at spawn, score %d", brick.kind.name, self.score)
            self.game_over_property.set(True)
        return conflict

    def merge_active_into_background(self) -> None:
        if self._offset is None:
            return
        x, y = self._offset
        self._background = matrix.merge(self._background, self.rotator.current_shape(), x, y)
        self._publish_board()

    def clear_rows(self) -> ClearRow:
        result = matrix.clear_full_rows(self._background, self.rules.score_per_line)
        self._background = result.new_matrix
        if result.lines_removed > 0:
            logger.debug("cleared %d rows for %d points", result.lines_removed, result.score_bonus)
            self._score.add(result.score_bonus)
        self._publish_board()
        return result

    def new_game(self) -> None:
        self._background = matrix.empty(self.config.rows, self.config.columns)
        self._score.reset()
        self.game_over_property.set(False)
        logger.info("new game on a %dx%d board", self.config.rows, self.config.columns)
        self.spawn_next_piece()
        self._publish_board()

    def get_state(self) -> np.ndarray:
        # Overlay current brick on a copy of the board for observation
        state = matrix.copy(self._background)
        if self._offset is not None and not self.game_over:
            x, y = self._offset
            shape = self.rotator.current_shape()
            for i, j in np.argwhere(shape != 0):
                row, col = y + int(i), x + int(j)
                if 0 <= row < self.rows and 0 <= col < self.columns:
                    # Use negative to indicate falling brick overlay
                    state[row, col] = -int(shape[i, j])
        return state
