"""
Play/pause toggle control for Duel Pong
"""

from collections.abc import Callable

import pygame

from duel_pong.utils.config import game_config


class PlayPauseButton:
    """Clickable button toggling the pause state

    While the game is paused it offers to "Play"; while it runs it shows
    "Pause" with the highlighted style.
    """

    def __init__(self, rect: pygame.Rect, on_click: Callable[[], None], font_size: int = 32):
        self.rect = rect
        self.on_click = on_click
        self.font_size = font_size
        self.text = "Play"
        self.highlighted = False
        self._font: pygame.font.Font | None = None

    def sync(self, is_paused: bool) -> None:
        """Updates the label to reflect the pause state"""
        if is_paused:
            self.text = "Play"
            self.highlighted = False
        else:
            self.text = "Pause"
            self.highlighted = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Calls on_click on a left click inside the button, returns True if clicked"""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, target: pygame.Surface) -> None:
        color = game_config.BUTTON_ACTIVE_COLOR if self.highlighted else game_config.BUTTON_COLOR
        pygame.draw.rect(target, color, self.rect, border_radius=5)

        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        text_surface = self._font.render(self.text, True, (255, 255, 255))
        text_rect = text_surface.get_rect()
        text_rect.center = self.rect.center
        target.blit(text_surface, text_rect)
