from __future__ import annotations

from typing import Tuple

import pygame

from block_duel.session import SessionSnapshot


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    color = palette.get(abs(v), (200, 200, 200))
    if v < 0:
        # Falling piece: brighten towards white
        color = tuple(min(255, c + 60) for c in color)
    return color


class Renderer:
    def __init__(self, cell_size: int = 24, margin: int = 20, header: int = 28) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.header = header

    def board_size(self, snapshot: SessionSnapshot) -> Tuple[int, int]:
        h, w = snapshot.grid.shape
        return w * self.cell_size, h * self.cell_size + self.header

    def _grid_surface(self, snapshot: SessionSnapshot) -> pygame.Surface:
        state = snapshot.grid
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
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        if snapshot.game_over:
            shade = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
            shade.fill((0, 0, 0, 150))
            surf.blit(shade, (0, 0))
        return surf

    def draw(self, screen: pygame.Surface, snapshot: SessionSnapshot, origin: Tuple[int, int],
             font: pygame.font.Font) -> None:
        x0, y0 = origin
        status = "GAME OVER" if snapshot.game_over else f"next {snapshot.next_kind.name}"
        text = font.render(
            f"{snapshot.name}  {snapshot.score} pts  {snapshot.lines} lines  {status}",
            True,
            (120, 255, 140),
        )
        screen.blit(text, (x0, y0))
        screen.blit(self._grid_surface(snapshot), (x0, y0 + self.header))
