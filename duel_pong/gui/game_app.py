"""
Main game application with PyGame GUI
"""

import sys
import traceback

import pygame

from duel_pong.core.game import PongGame
from duel_pong.core.renderer import Renderer
from duel_pong.gui.input_manager import InputManager
from duel_pong.gui.play_pause_button import PlayPauseButton
from duel_pong.gui.pygame_surface import PygameSurface
from duel_pong.utils.config import game_config


class DuelPongApp:
    """Hosts one game session in a PyGame window"""

    def __init__(self) -> None:
        """Initialize the application"""
        self.width = game_config.FIELD_WIDTH
        self.height = game_config.FIELD_HEIGHT
        bar_height = game_config.CONTROL_BAR_HEIGHT

        # Initialize PyGame, the field sits above the control bar
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height + bar_height))
        pygame.display.set_caption("Duel Pong")
        self.clock = pygame.time.Clock()

        self.field = self.screen.subsurface(pygame.Rect(0, 0, self.width, self.height))
        self.control_bar = pygame.Rect(0, self.height, self.width, bar_height)

        # Game components
        self.input_manager = InputManager()
        self.renderer = Renderer(PygameSurface(self.field), self.width, self.height)
        self.game = PongGame(
            self.width, self.height, self.input_manager.input_state, self.renderer
        )

        button_rect = pygame.Rect(0, 0, 120, bar_height - 14)
        button_rect.center = self.control_bar.center
        self.play_pause_button = PlayPauseButton(button_rect, self.toggle_pause)
        self.play_pause_button.sync(self.game.is_paused)

        self.running = True

    def toggle_pause(self) -> None:
        """Toggle pause state and refresh the button"""
        self.play_pause_button.sync(self.game.toggle_pause())

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a single pygame event"""
        if self.play_pause_button.handle_event(event):
            return

        action = self.input_manager.handle_event(event)
        if action == "quit":
            self.running = False
        elif action == "pause":
            self.toggle_pause()
        elif action == "restart":
            self.game.reset_game()

    def render(self) -> None:
        """Draw the control bar and present the frame"""
        self.screen.fill(game_config.BACKGROUND_COLOR, self.control_bar)
        self.play_pause_button.draw(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main application loop"""
        print("Starting Duel Pong...")

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.game.step()
                self.render()

                # Control frame rate
                self.clock.tick(game_config.FPS)

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        pygame.quit()
        print("Duel Pong closed properly.")


def main() -> None:
    """Main entry point"""
    try:
        app = DuelPongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
