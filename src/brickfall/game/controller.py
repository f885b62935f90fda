from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .core import BrickGame, EventSource, ViewData
from .matrix import ClearRow


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    DOWN = 3
    NONE = 4
    TICK = 5


@dataclass
class DownData:
    clear_row: Optional[ClearRow]
    view_data: Optional[ViewData]


class GameController:
    """Sequences engine calls for one input or timer event.

    A down event that cannot move the brick locks it: merge, clear rows, then
    spawn the next brick. Inputs are ignored while the game is over.
    """

    def __init__(self, game: BrickGame) -> None:
        self.game = game
        if self.game.view_data() is None:
            self.game.spawn_next_piece()

    def on_left(self) -> Optional[ViewData]:
        if not self.game.game_over:
            self.game.move_left()
        return self.game.view_data()

    def on_right(self) -> Optional[ViewData]:
        if not self.game.game_over:
            self.game.move_right()
        return self.game.view_data()

    def on_rotate(self) -> Optional[ViewData]:
        if not self.game.game_over:
            self.game.rotate()
        return self.game.view_data()

    def on_down(self, source: EventSource = EventSource.THREAD) -> DownData:
        if self.game.game_over:
            return DownData(clear_row=None, view_data=self.game.view_data())
        if self.game.move_down(source):
            return DownData(clear_row=None, view_data=self.game.view_data())
        self.game.merge_active_into_background()
        clear_row = self.game.clear_rows()
        self.game.spawn_next_piece()
        return DownData(clear_row=clear_row, view_data=self.game.view_data())

    def create_new_game(self) -> Optional[ViewData]:
        self.game.new_game()
        return self.game.view_data()

    def step(self, action: Action) -> DownData:
        if action == Action.LEFT:
            view = self.on_left()
        elif action == Action.RIGHT:
            view = self.on_right()
        elif action == Action.ROTATE:
            view = self.on_rotate()
        elif action == Action.DOWN:
            return self.on_down(EventSource.USER)
        elif action == Action.TICK:
            return self.on_down(EventSource.THREAD)
        elif action == Action.NONE:
            view = self.game.view_data()
        else:
            raise ValueError(f"unknown action {action!r}")
        return DownData(clear_row=None, view_data=view)
