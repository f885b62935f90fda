from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, List, Optional

import numpy as np
import pygame

from brickfall.game import BrickGame, EventSource, GameConfig, GameController
from .notification import ScoreNotification
from .renderer import Renderer

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def build_key_map(controller: GameController) -> Dict[int, Callable[[], object]]:
    left = controller.on_left
    right = controller.on_right
    rotate = controller.on_rotate

    def down() -> object:
        return controller.on_down(EventSource.USER)

    return {
        pygame.K_LEFT: left,
        pygame.K_a: left,
        pygame.K_RIGHT: right,
        pygame.K_d: right,
        pygame.K_UP: rotate,
        pygame.K_w: rotate,
        pygame.K_DOWN: down,
        pygame.K_s: down,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play brickfall with the keyboard.")
    p.add_argument("--config", type=str, default=None, help="YAML file overriding GameConfig fields")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--log-level", type=str, default="INFO")
    return p


def run(config: GameConfig, cell_size: int = 30) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = BrickGame(config)
        controller = GameController(game)
        renderer = Renderer(hidden_rows=config.hidden_buffer_rows, cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(config.rows, config.columns))
        pygame.display.set_caption("brickfall")

        # Background is only redrawn from published snapshots
        board: List[np.ndarray] = [game.board_matrix_property.value]
        game.board_matrix_property.subscribe(lambda old, new: board.__setitem__(0, new))

        def on_game_over(old: bool, new: bool) -> None:
            # Stop gravity while the game is over; new game restarts it
            pygame.time.set_timer(TICK_EVENT, 0 if new else config.tick_ms)

        game.game_over_property.subscribe(on_game_over)

        notification = ScoreNotification()
        keys = build_key_map(controller)
        paused = False
        pygame.time.set_timer(TICK_EVENT, config.tick_ms)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    if not paused:
                        notification.observe(controller.on_down(EventSource.THREAD), pygame.time.get_ticks())
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_n:
                        paused = False
                        notification.clear()
                        controller.create_new_game()
                    elif event.key == pygame.K_p:
                        paused = not paused
                    elif not paused and not game.game_over:
                        handler = keys.get(event.key)
                        if handler is not None:
                            notification.observe(handler(), pygame.time.get_ticks())

            renderer.draw(
                screen, board[0], game.view_data(), game.score, game.game_over, paused,
                notice=notification.text(pygame.time.get_ticks()),
            )
            clock.tick(60)
        logger.info("final score %d", game.score)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = GameConfig.from_yaml(args.config) if args.config else GameConfig()
    if args.seed is not None:
        config.random_seed = args.seed
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
