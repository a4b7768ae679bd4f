"""
Protocols for the collaborators of the game controller
"""

from duel_pong.core.interfaces.input import InputProtocol
from duel_pong.core.interfaces.surface import SurfaceProtocol

__all__ = ["InputProtocol", "SurfaceProtocol"]
