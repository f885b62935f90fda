from __future__ import annotations

import numpy as np
import pytest

from brickfall.game import BrickGame, BrickType, GameConfig, SequenceBrickGenerator


@pytest.fixture
def make_game():
    def factory(*kinds: BrickType, **config) -> BrickGame:
        return BrickGame(GameConfig(**config), generator=SequenceBrickGenerator(kinds or [BrickType.O]))

    return factory


@pytest.fixture
def o_game(make_game) -> BrickGame:
    game = make_game(BrickType.O)
    game.spawn_next_piece()
    return game


@pytest.fixture
def empty_board() -> np.ndarray:
    return np.zeros((6, 5), dtype=np.int8)
