from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from brickfall.game import Action, BrickGame, EventSource, GameConfig, GameController, RandomBrickGenerator
from brickfall.game.pieces import BrickType


class BrickfallEnv(gym.Env):
    """One step = one player action followed by one gravity tick.

    Actions: 0 left, 1 right, 2 rotate, 3 soft drop, 4 nothing.
    Observation is the visible part of the board; the falling brick shows up
    as negative color ids. Reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: Optional[int] = None) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.game = BrickGame(self.config)
        self.controller = GameController(self.game)
        self.render_mode = render_mode
        self.max_episode_steps = max_episode_steps

        max_id = max(int(k) for k in BrickType)
        self.observation_space = spaces.Box(
            low=-max_id,
            high=max_id,
            shape=(self.config.visible_rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(5)
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state()[self.config.hidden_buffer_rows:].astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {"score": self.game.score, "steps": self._steps}

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.generator = RandomBrickGenerator(seed=seed)
        self.controller.create_new_game()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        lines = 0

        result = self.controller.step(Action(int(action)))
        if result.clear_row is not None:
            lines += result.clear_row.lines_removed
        if not self.game.game_over:
            tick = self.controller.on_down(EventSource.THREAD)
            if tick.clear_row is not None:
                lines += tick.clear_row.lines_removed

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = self.max_episode_steps is not None and self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)

        info = self._get_info()
        info["lines_cleared"] = lines
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            from brickfall.visualization.palette import color_for_value

            grid = self._get_obs()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = int(grid[y, x])
                    color = color_for_value(v) if v else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
