"""
Duel Pong game configuration with Pydantic validation
"""

import json
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

SUPPORTED_LAYOUTS = ("qwerty", "azerty", "qwertz")


class GameConfig(BaseModel):
    """Court geometry, speeds and display settings for one simulation"""

    model_config = {"validate_assignment": True}

    # Court dimensions
    COURT_WIDTH: int = Field(default=800, gt=0, description="Court width in pixels")
    COURT_HEIGHT: int = Field(default=600, gt=0, description="Court height in pixels")

    # Paddles
    PADDLE_WIDTH: float = Field(default=5.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=50.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=10.0, gt=0, description="Paddle step per command")

    # Ball
    BALL_RADIUS: float = Field(default=5.0, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=2.5, gt=0, description="Ball speed per axis per tick")

    # Rounds
    ROUND_OVER_TICKS: int = Field(default=0, ge=0, description="Pause ticks after a side-out")

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(25, 25, 25), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(100, 100, 100), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in SUPPORTED_LAYOUTS:
            raise ValueError(f"Unknown keyboard layout '{v}'. Available: {list(SUPPORTED_LAYOUTS)}")
        return v

    @model_validator(mode="after")
    def validate_court_dimensions(self) -> "GameConfig":
        """Validate the court is large enough for paddles and ball"""
        # Each paddle sits one paddle width in from its edge, the ball must fit between them
        min_width = 4 * self.PADDLE_WIDTH + 2 * self.BALL_RADIUS
        if self.COURT_WIDTH <= min_width:
            raise ValueError(f"COURT_WIDTH must be greater than {min_width} pixels")

        if self.COURT_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(
                f"COURT_HEIGHT must be greater than PADDLE_HEIGHT ({self.PADDLE_HEIGHT})"
            )

        if self.COURT_HEIGHT <= 2 * self.BALL_RADIUS:
            raise ValueError(f"COURT_HEIGHT must be greater than {2 * self.BALL_RADIUS} pixels")

        return self

    @property
    def paddle_max_position(self) -> float:
        """Largest legal paddle axis position"""
        return self.COURT_HEIGHT - self.PADDLE_HEIGHT

    @property
    def paddle_center_position(self) -> float:
        return self.paddle_max_position / 2

    @property
    def ball_center(self) -> tuple[float, float]:
        """Ball position at the start of every round"""
        return (
            (self.COURT_WIDTH - self.BALL_RADIUS) / 2,
            (self.COURT_HEIGHT - self.BALL_RADIUS) / 2,
        )

    @property
    def left_paddle_x(self) -> float:
        return self.PADDLE_WIDTH

    @property
    def right_paddle_x(self) -> float:
        return self.COURT_WIDTH - 2 * self.PADDLE_WIDTH

    @property
    def left_paddle_face(self) -> float:
        """X coordinate of the left paddle side turned toward the court"""
        return self.left_paddle_x + self.PADDLE_WIDTH

    @property
    def right_paddle_face(self) -> float:
        """X coordinate of the right paddle side turned toward the court"""
        return self.right_paddle_x

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
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


def _is_multiple(distance: float, step: float) -> bool:
    steps = np.float64(distance) / np.float64(step)
    return bool(np.isclose(steps, np.round(steps)))


def validate_game_config(config: GameConfig) -> list[str]:
    """
    Check a valid configuration for settings that still play oddly

    Returns:
        List of warning messages, empty when nothing looks wrong
    """
    warnings: list[str] = []

    center_x, center_y = config.ball_center
    radius = config.BALL_RADIUS
    # Coordinates the ball centre must reach for each contact
    x_targets = {
        "left boundary": radius,
        "right boundary": config.COURT_WIDTH - radius,
        "left paddle": config.left_paddle_face + radius,
        "right paddle": config.right_paddle_face - radius,
    }
    y_targets = {
        "top wall": radius,
        "bottom wall": config.COURT_HEIGHT - radius,
    }

    off_grid = [
        name for name, x in x_targets.items() if not _is_multiple(x - center_x, config.BALL_SPEED)
    ]
    off_grid += [
        name for name, y in y_targets.items() if not _is_multiple(y - center_y, config.BALL_SPEED)
    ]
    if off_grid:
        warnings.append(
            f"BALL_SPEED ({config.BALL_SPEED}) does not divide the distance to: "
            f"{', '.join(off_grid)}; contacts resolve on crossing instead of landing exactly"
        )

    if config.BALL_SPEED >= 2 * radius:
        warnings.append(
            f"BALL_SPEED ({config.BALL_SPEED}) is not smaller than the ball diameter; "
            "the ball will visibly jump"
        )

    if config.PADDLE_SPEED > config.paddle_max_position:
        warnings.append("PADDLE_SPEED is larger than the paddle travel; paddles only hit the edges")

    if config.PADDLE_HEIGHT < 2 * radius:
        warnings.append("PADDLE_HEIGHT is smaller than the ball diameter")

    return warnings
