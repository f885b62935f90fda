"""Gymnasium environments for brickfall."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .brickfall_env import BrickfallEnv

# Register default 25x10 board (2 hidden rows, 23 visible)
register(
    id="Brickfall-25x10-v0",
    entry_point="brickfall.env.brickfall_env:BrickfallEnv",
)

__all__ = ["BrickfallEnv"]
