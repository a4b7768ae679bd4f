"""
Duel Pong game entities: ball and paddles
"""

from dataclasses import dataclass

import numpy as np

from duel_pong.utils.config import game_config


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Paddle:
    """Player paddle, moving vertically only"""

    def __init__(
        self,
        x: float,
        field_height: float,
        width: float | None = None,
        height: float | None = None,
        speed: float | None = None,
    ):
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = speed if speed is not None else game_config.PADDLE_SPEED
        self.field_height = field_height

        # Start vertically centered
        self.initial_y = field_height / 2 - self.height / 2
        self.position = Vector2D(x, self.initial_y)

        # Movement limits
        self.min_y = 0.0
        self.max_y = field_height - self.height

    def move_up(self) -> None:
        """Moves up by one step, stopping at the top edge"""
        self.position.y = max(self.min_y, self.position.y - self.speed)

    def move_down(self) -> None:
        """Moves down by one step, stopping at the bottom edge"""
        self.position.y = min(self.max_y, self.position.y + self.speed)

    def reset_position(self) -> None:
        self.position.y = self.initial_y

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


class Ball:
    """Game ball

    The position is the top-left corner of the ball's bounding square, the
    velocity is expressed in pixels per frame.
    """

    def __init__(
        self,
        field_width: float,
        field_height: float,
        rng: np.random.Generator | None = None,
        diameter: float | None = None,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.diameter = diameter if diameter is not None else game_config.BALL_DIAMETER
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(0.0, 0.0)
        self.reset()

    def reset(self) -> None:
        """Puts the ball back in the center with a random diagonal serve"""
        self.position = Vector2D(self.field_width / 2, self.field_height / 2)

        # Each axis picks its sign independently
        speed = game_config.BALL_SPEED
        signs = self.rng.choice([-1, 1], size=2)
        self.velocity = Vector2D(speed * int(signs[0]), speed * int(signs[1]))

    def update(self) -> bool:
        """Advances the ball by one frame, returns True on a wall bounce"""
        self.position += self.velocity

        # Reflect only when heading into a wall, never back out of it
        if self.position.y <= 0 and self.velocity.y < 0:
            self.velocity.y = -self.velocity.y
            return True
        if self.position.y + self.diameter >= self.field_height and self.velocity.y > 0:
            self.velocity.y = -self.velocity.y
            return True
        return False

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.position.x + self.radius, self.position.y + self.radius)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the bounding square properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.diameter, self.diameter)
