from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, Optional, Sequence

import pygame

from falling_blocks.game import FallingBlocksGame, GameConfig, LockEvent
from .renderer import Renderer


logger = logging.getLogger(__name__)

GRAVITY_EVENT = pygame.USEREVENT + 1


def key_bindings(game: FallingBlocksGame) -> Dict[int, Callable[[], object]]:
    return {
        pygame.K_w: game.rotate,
        pygame.K_UP: game.rotate,
        pygame.K_a: game.move_left,
        pygame.K_LEFT: game.move_left,
        pygame.K_d: game.move_right,
        pygame.K_RIGHT: game.move_right,
        pygame.K_s: game.tick,
        pygame.K_DOWN: game.tick,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play falling blocks with the keyboard.")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-ms", type=int, default=500)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(config: Optional[GameConfig] = None, gravity_ms: int = 500, cell_size: int = 28) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlocksGame(config)
        renderer = Renderer(cell_size=cell_size)

        def _report_lock(event: LockEvent) -> None:
            if event.cleared_rows:
                logger.info("cleared rows %s (+%d)", list(event.cleared_rows), event.score_delta)

        game.on_piece_locked(_report_lock)
        game.on_game_over(lambda score: logger.info("final score %d", score))

        screen = pygame.display.set_mode(renderer.window_size(game.get_state()))
        pygame.display.set_caption("Falling Blocks")
        bindings = key_bindings(game)

        # Gravity arrives as an event so it is serialized with key presses
        pygame.time.set_timer(GRAVITY_EVENT, gravity_ms)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == GRAVITY_EVENT:
                    game.tick()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and game.game_over:
                        game.reset()
                    else:
                        command = bindings.get(event.key)
                        if command is not None:
                            command()

            renderer.draw(screen, game.get_state(), game.score)
            if game.game_over:
                renderer.draw_game_over(screen)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig(width=args.width, height=args.height, random_seed=args.seed)
    run(config, gravity_ms=args.gravity_ms, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
