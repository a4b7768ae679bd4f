"""
Keyboard input handling for Duel Pong
"""

import pygame

from duel_pong.core.input_state import InputState

# Browser style names for the keys pygame calls "up", "down"...
SPECIAL_KEY_NAMES = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


def key_identifier(key_code: int) -> str:
    """Converts a pygame key code into the identifier used by InputState"""
    if key_code in SPECIAL_KEY_NAMES:
        return SPECIAL_KEY_NAMES[key_code]
    return pygame.key.name(key_code).lower()


class InputManager:
    """Feeds pygame keyboard events into an InputState"""

    def __init__(self, input_state: InputState | None = None) -> None:
        self.input_state = input_state if input_state is not None else InputState()

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (pause, quit, etc.) or None
        """
        if event.type == pygame.KEYDOWN:
            self.input_state.press(key_identifier(event.key))

            # Global game controls
            if event.key == pygame.K_ESCAPE:
                return "quit"
            elif event.key == pygame.K_p:
                return "pause"
            elif event.key == pygame.K_r:
                return "restart"

        elif event.type == pygame.KEYUP:
            self.input_state.release(key_identifier(event.key))

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key releases are not delivered to an unfocused window
            self.input_state.release_all()

        elif event.type == pygame.QUIT:
            return "quit"

        return None
