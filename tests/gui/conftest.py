"""
Fixtures for the PyGame front end tests
"""

import pygame
import pytest


@pytest.fixture(autouse=True)
def pygame_session():
    """Initialize pygame (headless, see tests/conftest.py) around each test"""
    pygame.init()
    yield
    pygame.quit()
