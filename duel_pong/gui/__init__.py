"""
PyGame front end of Duel Pong
"""

from duel_pong.gui.game_app import DuelPongApp
from duel_pong.gui.game_app import main

__all__ = ["DuelPongApp", "main"]
