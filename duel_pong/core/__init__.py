"""
Core module of Duel Pong game
"""

from duel_pong.core.collision import CollisionDetector
from duel_pong.core.entities import Ball
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import Vector2D
from duel_pong.core.game import GameStatus
from duel_pong.core.game import PongGame
from duel_pong.core.input_state import InputState
from duel_pong.core.renderer import Renderer

__all__ = [
    "Ball",
    "Paddle",
    "Vector2D",
    "CollisionDetector",
    "InputState",
    "Renderer",
    "GameStatus",
    "PongGame",
]
