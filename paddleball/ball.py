"""The ball: serving, bouncing off walls and paddles, and scoring."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from paddleball.config import (
    BALL_SIZE,
    BALL_SPEED,
    PLAYER_HEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Rect,
)
from paddleball.player import Player

_DEG_PER_PX = 45.0 / (PLAYER_HEIGHT / 2.0)
_RAD_PER_DEG = math.pi / 180


@dataclass
class Ball:
    """The ball's rectangle and its velocity in pixels per frame."""

    rect: Rect = field(default_factory=lambda: Rect(0, 0, BALL_SIZE, BALL_SIZE))
    vel_x: float = 0.0
    vel_y: float = 0.0

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Put the ball back in the middle and stop it."""
        self.rect.x = (WINDOW_WIDTH - self.rect.w / 2) / 2
        self.rect.y = (WINDOW_HEIGHT - self.rect.h / 2) / 2
        self.vel_x = self.vel_y = 0.0

    def start(self, rng: random.Random) -> None:
        """Serve the ball horizontally in a random direction if it is at rest."""
        if self.vel_x == 0 and self.vel_y == 0:
            self.vel_x = float(BALL_SPEED * (1 if rng.randrange(2) == 0 else -1))

    def hits_player_y(self, player: Player) -> bool:
        """Whether the ball overlaps the paddle vertically."""
        return self.rect.bottom >= player.rect.y and self.rect.y <= player.rect.bottom

    def bounce_from(self, player: Player) -> None:
        """Send the ball back at an angle set by where it struck the paddle."""
        paddle_cy = player.rect.y + PLAYER_HEIGHT / 2.0
        ball_cy = self.rect.y + BALL_SIZE / 2.0
        is_left = player.rect.x < WINDOW_WIDTH / 2.0
        offset = abs(paddle_cy - ball_cy) * _DEG_PER_PX * _RAD_PER_DEG

        rad = 0.0
        if is_left:
            if paddle_cy > ball_cy:
                rad = -offset
            elif paddle_cy < ball_cy:
                rad = offset
        else:
            if paddle_cy > ball_cy:
                rad = 135 + offset
            elif paddle_cy < ball_cy:
                rad = -135 - offset

        self.vel_x = BALL_SPEED * math.cos(rad)
        self.vel_y = BALL_SPEED * math.sin(rad)


def update_ball(ball: Ball, left: Player, right: Player) -> None:
    """Advance the ball one frame, handling scoring and collisions."""
    rect = ball.rect
    if rect.x >= WINDOW_WIDTH:
        ball.reset()
        left.score += 1
    elif rect.right <= 0:
        ball.reset()
        right.score += 1
    elif rect.y <= 0 or rect.bottom >= WINDOW_HEIGHT:
        ball.vel_y *= -1
    elif left.rect.x < rect.x <= left.rect.right and ball.hits_player_y(left):
        ball.bounce_from(left)
    elif right.rect.x <= rect.right < right.rect.right and ball.hits_player_y(right):
        ball.bounce_from(right)
    rect.x += ball.vel_x
    rect.y += ball.vel_y