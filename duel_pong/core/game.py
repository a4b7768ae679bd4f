"""
Game controller for Duel Pong: per-frame update and draw passes
"""

from enum import Enum
from typing import Any

import numpy as np

from duel_pong.core.collision import CollisionDetector
from duel_pong.core.entities import Ball, Paddle
from duel_pong.core.interfaces.input import InputProtocol
from duel_pong.core.renderer import Renderer
from duel_pong.utils.config import game_config


class GameStatus(Enum):
    """Pause state of the game"""

    PAUSED = "paused"
    RUNNING = "running"


class PongGame:
    """Owns the entities of a single game session

    The drawing surface (through the renderer) and the keyboard state are
    injected so that the same controller runs in a pygame window or in tests.
    """

    def __init__(
        self,
        field_width: float,
        field_height: float,
        input_state: InputProtocol,
        renderer: Renderer,
        rng: np.random.Generator | None = None,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.input_state = input_state
        self.renderer = renderer
        self.collision_detector = CollisionDetector()

        self.left_paddle = Paddle(game_config.PADDLE_MARGIN, field_height)
        self.right_paddle = Paddle(
            field_width - game_config.PADDLE_MARGIN - game_config.PADDLE_WIDTH, field_height
        )
        self.ball = Ball(field_width, field_height, rng=rng)

        self.left_player_score = 0
        self.right_player_score = 0

        # Wait for the player to press play
        self.status = GameStatus.PAUSED

    @property
    def is_paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    def toggle_pause(self) -> bool:
        """Switches between paused and running, returns the new pause state"""
        if self.is_paused:
            self.status = GameStatus.RUNNING
        else:
            self.status = GameStatus.PAUSED
        return self.is_paused

    def handle_input(self) -> None:
        """Moves the paddles according to the held keys"""
        layout = game_config.get_keyboard_layout()
        for paddle, keys in (
            (self.left_paddle, layout.left_keys),
            (self.right_paddle, layout.right_keys),
        ):
            if self.input_state.is_pressed(keys["up"]):
                paddle.move_up()
            if self.input_state.is_pressed(keys["down"]):
                paddle.move_down()

    def update(self) -> dict[str, Any]:
        """Runs one physics step unless paused and returns what happened"""
        events: dict[str, Any] = {"wall_bounces": 0, "paddle_hits": [], "goals": []}

        if self.is_paused:
            return events

        self.handle_input()

        if self.ball.update():
            events["wall_bounces"] += 1

        for side, paddle in (("left", self.left_paddle), ("right", self.right_paddle)):
            if self.collision_detector.ball_hits_paddle(self.ball, paddle):
                self._bounce_off_paddle(paddle)
                events["paddle_hits"].append(side)

        events["goals"] = self._check_goals()
        return events

    def _bounce_off_paddle(self, paddle: Paddle) -> None:
        """Sends the ball back with an angle depending on where it hit the paddle"""
        ball = self.ball

        # Put the ball flush against the face it came from
        if ball.velocity.x < 0:
            ball.position.x = paddle.position.x + paddle.width
        else:
            ball.position.x = paddle.position.x - ball.diameter

        ball.velocity.x = -ball.velocity.x

        # -1 at the top edge, 0 at the center, 1 at the bottom edge
        relative_intersection_y = (ball.center.y - paddle.center_y) / (paddle.height / 2)
        ball.velocity.y = relative_intersection_y * game_config.MAX_BOUNCE_SPEED

    def _check_goals(self) -> list[str]:
        """Scores a point when the ball leaves the field sideways"""
        goals = []
        if self.ball.position.x < 0:
            self.right_player_score += 1
            goals.append("right")
            self.ball.reset()
        if self.ball.position.x > self.field_width:
            self.left_player_score += 1
            goals.append("left")
            self.ball.reset()
        return goals

    def draw(self) -> None:
        """Draws the current scene, frozen or not"""
        self.renderer.clear()
        self.renderer.draw_center_line()
        self.renderer.draw_paddle(self.left_paddle)
        self.renderer.draw_paddle(self.right_paddle)
        self.renderer.draw_ball(self.ball)
        self.renderer.draw_score(self.left_player_score, self.right_player_score)

    def step(self) -> dict[str, Any]:
        """Runs one animation frame: update then draw"""
        events = self.update()
        self.draw()
        return events

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "left_paddle_position": self.left_paddle.position.to_tuple(),
            "right_paddle_position": self.right_paddle.position.to_tuple(),
            "score": (self.left_player_score, self.right_player_score),
            "status": self.status.value,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }

    def reset_game(self) -> None:
        """Resets the game to zero, keeping the pause state"""
        self.left_player_score = 0
        self.right_player_score = 0
        self.left_paddle.reset_position()
        self.right_paddle.reset_position()
        self.ball.reset()
