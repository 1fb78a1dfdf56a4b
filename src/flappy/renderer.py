"""
renderer.py: Draws a GameContext onto a pygame surface.
"""

import math
from typing import Optional, Tuple

import pygame

from .assets import AssetBundle
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PIPE_WIDTH,
    SKY_COLOR, PIPE_TOP_COLOR, PIPE_BOTTOM_COLOR, BIRD_COLOR, SCORE_COLOR,
    TEXT_COLOR, GAME_OVER_COLOR, OUTLINE_COLOR,
    SCORE_Y, SCORE_FONT_SIZE, TITLE_FONT_SIZE, MESSAGE_FONT_SIZE,
    START_TEXT, GAME_OVER_TEXT, RETRY_TEXT
)
from .data_models import GameContext, GameState, Pipe

Color = Tuple[int, int, int]


class Renderer:
    """Read-only view of the game; draw() never changes the context."""

    def __init__(self, assets: Optional[AssetBundle] = None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.assets = assets or AssetBundle()

        self.score_font = pygame.font.Font(None, SCORE_FONT_SIZE)
        self.score_font.set_bold(True)
        self.title_font = pygame.font.Font(None, TITLE_FONT_SIZE)
        self.title_font.set_bold(True)
        self.message_font = pygame.font.Font(None, MESSAGE_FONT_SIZE)

    def draw(self, surface: pygame.Surface, ctx: GameContext):
        self._draw_background(surface, ctx.bg_x)
        for pipe in ctx.pipes:
            self._draw_pipe(surface, pipe)
        self._draw_bird(surface, ctx)
        self._draw_text(surface, str(ctx.score), self.score_font, SCORE_COLOR, SCORE_Y)
        self._draw_overlay(surface, ctx)

    def _draw_background(self, surface: pygame.Surface, bg_x: float):
        background = self.assets.background
        width = self.assets.background_width
        if background is None or width <= 0:
            surface.fill(SKY_COLOR)
            return

        offset = -((-bg_x) % width)
        surface.blit(background, (offset, 0))
        surface.blit(background, (offset + width, 0))

    def _draw_pipe(self, surface: pygame.Surface, pipe: Pipe):
        top = self.assets.pipe_top
        if top is not None:
            surface.blit(top, (pipe.x, pipe.gap_y - top.get_height()))
        else:
            pygame.draw.rect(surface, PIPE_TOP_COLOR,
                             (pipe.x, 0, PIPE_WIDTH, pipe.gap_y))

        bottom = self.assets.pipe_bottom
        if bottom is not None:
            surface.blit(bottom, (pipe.x, pipe.gap_bottom))
        else:
            pygame.draw.rect(surface, PIPE_BOTTOM_COLOR,
                             (pipe.x, pipe.gap_bottom, PIPE_WIDTH, SCREEN_HEIGHT - pipe.gap_bottom))

    def _draw_bird(self, surface: pygame.Surface, ctx: GameContext):
        bird = ctx.bird
        sprite = self.assets.bird_sprite(bird.flapping)
        if sprite is None:
            pygame.draw.rect(surface, BIRD_COLOR, (bird.x, bird.y, bird.width, bird.height))
            return

        # Screen y points down, so a positive (nose-down) angle is clockwise.
        rotated = pygame.transform.rotate(sprite, -math.degrees(bird.angle))
        cx, cy = bird.center
        surface.blit(rotated, rotated.get_rect(center=(round(cx), round(cy))))

    def _draw_overlay(self, surface: pygame.Surface, ctx: GameContext):
        mid_y = SCREEN_HEIGHT // 2
        if ctx.state == GameState.START:
            self._draw_text(surface, START_TEXT, self.message_font, TEXT_COLOR, mid_y - 20)
        elif ctx.state == GameState.GAME_OVER:
            self._draw_text(surface, GAME_OVER_TEXT, self.title_font, GAME_OVER_COLOR, mid_y - 40)
            self._draw_text(surface, f"Score: {ctx.score}", self.message_font, TEXT_COLOR, mid_y)
            self._draw_text(surface, f"High Score: {ctx.high_score}", self.message_font, TEXT_COLOR, mid_y + 28)
            self._draw_text(surface, RETRY_TEXT, self.message_font, TEXT_COLOR, mid_y + 60)

    @staticmethod
    def _draw_text(surface: pygame.Surface, text: str, font: pygame.font.Font,
                   color: Color, center_y: int):
        """Outlined text centred horizontally on the screen."""
        outline = font.render(text, True, OUTLINE_COLOR)
        label = font.render(text, True, color)
        rect = label.get_rect(center=(SCREEN_WIDTH // 2, center_y))
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            surface.blit(outline, rect.move(dx, dy))
        surface.blit(label, rect)
