"""Game dimensions, speeds and the rectangle type shared by all game objects."""

from __future__ import annotations

from dataclasses import dataclass

WINDOW_TITLE = "Paddleball"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FPS = 60
FRAME_TARGET_TIME = 1000 // FPS

PLAYER_WIDTH = 20
PLAYER_HEIGHT = 150
PLAYER_INDENT = 40

BALL_SPEED = 8
PLAYER_SPEED = 5

BALL_SIZE = 20
MIDDLE_LINE_WIDTH = 10
MIDDLE_LINE_INDENT = 40

SCORE_FONT_SIZE = 72
SCORE_TOP = 40


@dataclass
class Rect:
    """An axis-aligned rectangle with floating point position and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def center_y(self) -> float:
        """Vertical centre of the rectangle."""
        return self.y + self.h / 2

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.w

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.h