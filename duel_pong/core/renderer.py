"""
Renderer turning game entities into drawing surface commands
"""

import math

from duel_pong.core.entities import Ball, Paddle
from duel_pong.core.interfaces.surface import SurfaceProtocol
from duel_pong.utils.config import game_config


class Renderer:
    """Stateless adapter drawing entities on a SurfaceProtocol"""

    def __init__(self, surface: SurfaceProtocol, width: float, height: float):
        self.surface = surface
        self.width = width
        self.height = height

        self.paddle_color = game_config.PADDLE_COLOR
        self.ball_color = game_config.BALL_COLOR
        self.line_color = game_config.CENTER_LINE_COLOR
        self.score_color = game_config.SCORE_COLOR

    def clear(self) -> None:
        """Clear the whole field"""
        self.surface.clear_rect(0, 0, self.width, self.height)

    def draw_paddle(self, paddle: Paddle) -> None:
        """Draw a player paddle"""
        x, y, width, height = paddle.get_rect()
        self.surface.fill_rect(x, y, width, height, self.paddle_color)

    def draw_ball(self, ball: Ball) -> None:
        """Draw the ball as a disc centered in its bounding square"""
        center = ball.center
        self.surface.fill_arc(center.x, center.y, ball.radius, 0, math.pi * 2, self.ball_color)

    def draw_center_line(self) -> None:
        """Draw the dashed net"""
        center_x = self.width / 2
        dash = game_config.CENTER_LINE_DASH
        self.surface.stroke_dashed_line(
            (center_x, 0), (center_x, self.height), (dash, dash), self.line_color
        )

    def draw_score(self, left_player_score: int, right_player_score: int) -> None:
        """Draw each score above its half of the field"""
        size = game_config.SCORE_FONT_SIZE
        y = game_config.SCORE_Y
        self.surface.fill_text(
            str(left_player_score), self.width / 4, y, size, self.score_color, align="center"
        )
        self.surface.fill_text(
            str(right_player_score), self.width / 4 * 3, y, size, self.score_color, align="center"
        )
