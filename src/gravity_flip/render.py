"""
render.py: Immediate-mode pygame drawing of a RenderSnapshot.
"""

import pygame

from .config import GameConfig
from .constants import (
    RAIL_THICKNESS, BG_COLOR, RAIL_COLOR, OBSTACLE_COLOR, PLAYER_COLOR,
    DEAD_PLAYER_COLOR, TEXT_COLOR, DIM_TEXT_COLOR, OVERLAY_COLOR
)
from .data_models import RenderSnapshot


class Renderer:
    """Reads snapshots only; never touches simulation state."""

    def __init__(self, screen: pygame.Surface, config: GameConfig):
        self.screen = screen
        self.config = config
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

    def draw(self, snapshot: RenderSnapshot, started: bool = True):
        screen = self.screen
        cfg = self.config
        screen.fill(BG_COLOR)

        # Rails
        pygame.draw.rect(screen, RAIL_COLOR, (0, 0, cfg.width, RAIL_THICKNESS))
        pygame.draw.rect(screen, RAIL_COLOR,
                         (0, cfg.height - RAIL_THICKNESS, cfg.width, RAIL_THICKNESS))

        # Obstacles: solid bar above and below the gap
        for x, gap_y, gap_height in snapshot.obstacles:
            if gap_y > 0:
                pygame.draw.rect(screen, OBSTACLE_COLOR, (x, 0, cfg.obstacle_width, gap_y))
            bottom_y = gap_y + gap_height
            if bottom_y < cfg.height:
                pygame.draw.rect(screen, OBSTACLE_COLOR,
                                 (x, bottom_y, cfg.obstacle_width, cfg.height - bottom_y))

        self._draw_player(snapshot)

        # HUD
        score_text = self.large_font.render(str(snapshot.score), True, TEXT_COLOR)
        screen.blit(score_text, (cfg.width // 2 - score_text.get_width() // 2, 20))
        best_text = self.font.render(f"Best: {snapshot.best_score}", True, DIM_TEXT_COLOR)
        screen.blit(best_text, (cfg.width - best_text.get_width() - 16, 16))

        if not started:
            self._draw_overlay("GRAVITY FLIP", "Press any key or click to start")
        elif snapshot.terminal:
            self._draw_overlay("GAME OVER", f"Score {snapshot.score}  -  press any key to restart")

    def _draw_player(self, snapshot: RenderSnapshot):
        size = self.config.player_size
        color = DEAD_PLAYER_COLOR if snapshot.terminal else PLAYER_COLOR
        square = pygame.Surface((size, size), pygame.SRCALPHA)
        square.fill(color)
        # pygame rotates counter-clockwise; positive velocity (falling) tilts clockwise
        rotated = pygame.transform.rotate(square, -snapshot.rotation)
        center = (self.config.player_x + size / 2, snapshot.player_y + size / 2)
        self.screen.blit(rotated, rotated.get_rect(center=center))

    def _draw_overlay(self, title: str, subtitle: str):
        cfg = self.config
        shade = pygame.Surface((cfg.width, cfg.height), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        self.screen.blit(shade, (0, 0))

        title_surf = self.large_font.render(title, True, TEXT_COLOR)
        self.screen.blit(title_surf, (cfg.width // 2 - title_surf.get_width() // 2,
                                      cfg.height // 2 - 50))
        sub_surf = self.font.render(subtitle, True, DIM_TEXT_COLOR)
        self.screen.blit(sub_surf, (cfg.width // 2 - sub_surf.get_width() // 2,
                                    cfg.height // 2 + 10))
