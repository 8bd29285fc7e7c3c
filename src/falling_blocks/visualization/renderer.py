from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, state: np.ndarray) -> Tuple[int, int]:
        h, w = state.shape
        return w * self.cell_size + self.margin * 2, h * self.cell_size + self.margin * 3

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(state[y, x]), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, score: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin * 2))
        text = self._font.render(f"Score: {score}", True, (230, 230, 230))
        screen.blit(text, (self.margin, self.margin // 2))

    def draw_game_over(self, screen: pygame.Surface) -> None:
        font = pygame.font.SysFont(None, 32)
        text = font.render("Game Over - R to restart, ESC to quit", True, (255, 100, 100))
        rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(text, rect)
