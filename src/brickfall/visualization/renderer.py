from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from brickfall.game import ViewData
from .palette import color_for_value

BACKGROUND = (10, 10, 14)
BOARD_FILL = (30, 30, 36)
EMPTY_CELL = (20, 20, 26)
TEXT = (230, 230, 230)
BONUS = (255, 215, 0)


class Renderer:
    def __init__(self, hidden_rows: int, cell_size: int = 30, margin: int = 20, panel_width: int = 160) -> None:
        self.hidden_rows = hidden_rows
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, rows: int, columns: int) -> tuple[int, int]:
        visible = rows - self.hidden_rows
        width = columns * self.cell_size + self.margin * 3 + self.panel_width
        height = visible * self.cell_size + self.margin * 2
        return width, height

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 32)
        return self._font

    def _cell_rect(self, col: int, row: int, origin: tuple[int, int]) -> pygame.Rect:
        return pygame.Rect(
            origin[0] + col * self.cell_size,
            origin[1] + row * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _draw_board(self, screen: pygame.Surface, board: np.ndarray, brick: Optional[ViewData]) -> None:
        rows, columns = board.shape
        origin = (self.margin, self.margin)
        pygame.draw.rect(
            screen,
            BOARD_FILL,
            pygame.Rect(origin[0], origin[1], columns * self.cell_size, (rows - self.hidden_rows) * self.cell_size),
        )
        for y in range(self.hidden_rows, rows):
            for x in range(columns):
                v = int(board[y, x])
                color = color_for_value(v) if v else EMPTY_CELL
                pygame.draw.rect(screen, color, self._cell_rect(x, y - self.hidden_rows, origin))
        if brick is None:
            return
        for i, j in np.argwhere(brick.brick_data != 0):
            row = brick.y + int(i)
            if row < self.hidden_rows:
                continue
            col = brick.x + int(j)
            color = color_for_value(int(brick.brick_data[i, j]))
            pygame.draw.rect(screen, color, self._cell_rect(col, row - self.hidden_rows, origin))

    def _draw_panel(self, screen: pygame.Surface, columns: int, brick: Optional[ViewData], score: int,
                    notice: Optional[str] = None) -> None:
        font = self._font_obj()
        left = self.margin * 2 + columns * self.cell_size
        screen.blit(font.render(f"Score {score}", True, TEXT), (left, self.margin))
        if notice:
            screen.blit(font.render(notice, True, BONUS), (left, self.margin + 80 + 4 * self.cell_size))
        screen.blit(font.render("Next", True, TEXT), (left, self.margin + 40))
        if brick is None:
            return
        origin = (left, self.margin + 70)
        for i, j in np.argwhere(brick.next_brick_data != 0):
            color = color_for_value(int(brick.next_brick_data[i, j]))
            pygame.draw.rect(screen, color, self._cell_rect(int(j), int(i), origin))

    def draw(self, screen: pygame.Surface, board: np.ndarray, brick: Optional[ViewData], score: int,
             game_over: bool = False, paused: bool = False, notice: Optional[str] = None) -> None:
        screen.fill(BACKGROUND)
        self._draw_board(screen, board, None if game_over else brick)
        self._draw_panel(screen, board.shape[1], brick, score, notice)
        banner = "Game Over - N for new game" if game_over else ("Paused" if paused else "")
        if banner:
            text = self._font_obj().render(banner, True, TEXT)
            rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
