"""
PyGame drawing surface for Duel Pong
"""

import math

import numpy as np
import pygame

from duel_pong.utils.config import game_config

Color = tuple[int, int, int]


class PygameSurface:
    """Draws the game primitives on a pygame.Surface"""

    def __init__(self, target: pygame.Surface, background_color: Color | None = None):
        self.target = target
        self.background_color = background_color or game_config.BACKGROUND_COLOR
        self.line_width = 1
        self._fonts: dict[int, pygame.font.Font] = {}

    def _get_font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.target.fill(self.background_color, pygame.Rect(x, y, width, height))

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.target, color, pygame.Rect(x, y, width, height))

    def fill_arc(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        color: Color,
    ) -> None:
        if end_angle - start_angle >= math.tau:
            pygame.draw.circle(self.target, color, (center_x, center_y), radius)
            return

        # Pie slice approximated by a polygon
        angles = np.linspace(start_angle, end_angle, num=32)
        points = [(center_x, center_y)] + [
            (center_x + radius * math.cos(a), center_y + radius * math.sin(a)) for a in angles
        ]
        pygame.draw.polygon(self.target, color, points)

    def stroke_dashed_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        dash: tuple[float, float],
        color: Color,
    ) -> None:
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        length = math.hypot(dx, dy)
        if length == 0:
            return

        unit_x, unit_y = dx / length, dy / length
        on_length, off_length = dash
        if on_length < 0 or off_length < 0 or on_length + off_length <= 0:
            raise ValueError(f"Invalid dash pattern: {dash}")

        travelled = 0.0
        while travelled < length:
            dash_end = min(travelled + on_length, length)
            pygame.draw.line(
                self.target,
                color,
                (start[0] + unit_x * travelled, start[1] + unit_y * travelled),
                (start[0] + unit_x * dash_end, start[1] + unit_y * dash_end),
                self.line_width,
            )
            travelled = dash_end + off_length

    def fill_text(
        self, text: str, x: float, y: float, size: int, color: Color, align: str = "left"
    ) -> None:
        font = self._get_font(size)
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect()

        # y is the baseline
        text_rect.top = round(y - font.get_ascent())
        if align == "center":
            text_rect.centerx = round(x)
        elif align == "right":
            text_rect.right = round(x)
        elif align == "left":
            text_rect.left = round(x)
        else:
            raise ValueError(f"Unknown text alignment: {align}")

        self.target.blit(text_surface, text_rect)
