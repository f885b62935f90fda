"""Game module for brickfall.

Exports the engine and its supporting pieces:
- BrickGame: board, falling brick, score and game-over state
- GameController: event sequencing (move, lock, clear, respawn)
- BrickType / Brick: piece catalog
- RandomBrickGenerator / SequenceBrickGenerator: piece sources
- ScoringRules: scoring constants and helpers
"""

from .core import BrickGame, EventSource, GameConfig, GameStatus, ViewData
from .controller import Action, DownData, GameController
from .generator import BrickGenerator, RandomBrickGenerator, SequenceBrickGenerator
from .matrix import ClearRow
from .observable import Observable
from .pieces import Brick, BrickType
from .rotator import BrickRotator, NextShape
from .rules import Score, ScoringRules

__all__ = [
    "Action",
    "Brick",
    "BrickGame",
    "BrickGenerator",
    "BrickRotator",
    "BrickType",
    "ClearRow",
    "DownData",
    "EventSource",
    "GameConfig",
    "GameController",
    "GameStatus",
    "NextShape",
    "Observable",
    "RandomBrickGenerator",
    "Score",
    "ScoringRules",
    "SequenceBrickGenerator",
    "ViewData",
]
