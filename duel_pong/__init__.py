"""
Duel Pong: two-paddle ball game on a 2D drawing surface
"""

__version__ = "0.1.0"
