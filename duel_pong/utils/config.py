"""
Duel Pong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

Color = tuple[int, int, int]


@dataclass
class KeyboardLayout:
    """Key identifiers moving each paddle"""

    name: str
    left_keys: dict[str, str]
    right_keys: dict[str, str]


ARROW_KEYS = {"up": "ArrowUp", "down": "ArrowDown"}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY", left_keys={"up": "w", "down": "s"}, right_keys=ARROW_KEYS
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": "z", "down": "s"},  # Z instead of W
        right_keys=ARROW_KEYS,
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ", left_keys={"up": "w", "down": "s"}, right_keys=ARROW_KEYS
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Ball physics (per frame)
    BALL_DIAMETER: float = Field(default=15.0, gt=0, description="Ball diameter in pixels")
    MAX_BOUNCE_SPEED: float = Field(
        default=5.0, gt=0, description="Vertical speed after an edge hit"
    )
    BALL_SPEED: float = Field(default=2.0, gt=0, description="Serve speed on each axis")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=6.0, gt=0, description="Paddle speed per frame")
    PADDLE_MARGIN: float = Field(default=20.0, ge=0, description="Paddle margin from edge")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    CONTROL_BAR_HEIGHT: int = Field(default=50, gt=0, description="Height of the button bar")
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0), description="RGB color")
    PADDLE_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    BALL_COLOR: Color = Field(default=(255, 193, 7), description="RGB color")
    CENTER_LINE_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    CENTER_LINE_DASH: float = Field(default=10.0, gt=0, description="Dash and gap length")
    SCORE_COLOR: Color = Field(default=(128, 128, 128), description="RGB color")
    SCORE_FONT_SIZE: int = Field(default=40, gt=0, description="Score font size in pixels")
    SCORE_Y: float = Field(default=50.0, ge=0, description="Score text baseline")
    BUTTON_COLOR: Color = Field(default=(76, 175, 80), description="RGB color when paused")
    BUTTON_ACTIVE_COLOR: Color = Field(
        default=(244, 67, 54), description="RGB color while the game runs"
    )

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + self.BALL_DIAMETER
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, self.BALL_DIAMETER)
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    @model_validator(mode="after")
    def validate_ball_speed(self) -> "GameConfig":
        """Validate that the serve speed doesn't exceed the bounce speed"""
        if self.BALL_SPEED > self.MAX_BOUNCE_SPEED:
            raise ValueError(
                f"BALL_SPEED ({self.BALL_SPEED}) must not exceed "
                f"MAX_BOUNCE_SPEED ({self.MAX_BOUNCE_SPEED})"
            )
        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "duel_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _replace_values(self, GameConfig())


def _replace_values(target: BaseModel, source: BaseModel) -> None:
    """Copy every field of an already validated config in one step"""
    target.__dict__.update(source.__dict__)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "duel_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except ValueError as e:
        print(f"Error loading config: {e}")
        return False

    _replace_values(game_config, loaded_config)
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the replaced ones"""
    for name, new_value in kwargs.items():
        previous = getattr(obj, name)
        setattr(obj, name, new_value)
        old_values.setdefault(name, previous)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        for name in reversed(list(old_values)):
            setattr(game_config, name, old_values[name])
