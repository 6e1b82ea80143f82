from __future__ import annotations

from typing import Optional

import pygame

from block_duel.commentary import CommentaryFeed
from block_duel.match import Match
from .renderer import Renderer


def run(match: Match, fps: int = 60, feed: Optional[CommentaryFeed] = None, cell_size: int = 24) -> None:
    """Show both sessions side by side and drive them with the frame clock.

    Space pauses, R resets, Esc quits. The viewer only reads snapshots.
    """
    renderer = Renderer(cell_size=cell_size)
    margin = renderer.margin
    board_w, board_h = renderer.board_size(match.left.snapshot())
    width = margin * 3 + board_w * 2
    height = margin * 2 + board_h + 40

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(f"Block Duel - {match.left.strategy.name} vs {match.right.strategy.name}")
        font = pygame.font.SysFont(None, 22)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        match.toggle_pause()
                    elif event.key == pygame.K_r:
                        match.reset()
                        if feed is not None:
                            feed.reset("Rebooting simulation...")

            dt_ms = clock.tick(fps)
            match.advance(dt_ms)

            screen.fill((10, 10, 14))
            left, right = match.snapshots()
            renderer.draw(screen, left, (margin, margin), font)
            renderer.draw(screen, right, (margin * 2 + board_w, margin), font)

            footer = f"{match.elapsed_ms // 1000}s"
            if match.paused:
                footer += "  [paused]"
            if feed is not None and not match.paused:
                footer += "  " + feed.update(match.summary())
            elif feed is not None:
                footer += "  " + feed.text
            txt = font.render(footer, True, (230, 230, 230))
            screen.blit(txt, (margin, height - margin - 16))
            pygame.display.flip()
    finally:
        if feed is not None:
            feed.close()
        pygame.quit()
