"""
Shared fixtures for Duel Pong tests
"""

import os

# Run pygame without a window or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from duel_pong.core.game import PongGame  # noqa: E402
from duel_pong.core.input_state import InputState  # noqa: E402
from duel_pong.core.renderer import Renderer  # noqa: E402


class RecordingSurface:
    """Drawing surface keeping a list of the primitive calls it received"""

    def __init__(self):
        self.calls = []

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear_rect", x, y, width, height))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def fill_arc(self, center_x, center_y, radius, start_angle, end_angle, color):
        self.calls.append(("fill_arc", center_x, center_y, radius, start_angle, end_angle, color))

    def stroke_dashed_line(self, start, end, dash, color):
        self.calls.append(("stroke_dashed_line", start, end, dash, color))

    def fill_text(self, text, x, y, size, color, align="left"):
        self.calls.append(("fill_text", text, x, y, size, color, align))

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def input_state():
    return InputState()


@pytest.fixture
def game(recording_surface, input_state):
    """A paused 800x600 game drawing on a recording surface"""
    renderer = Renderer(recording_surface, 800, 600)
    return PongGame(800, 600, input_state, renderer, rng=np.random.default_rng(42))
