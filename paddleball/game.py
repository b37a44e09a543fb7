"""Game state, command handling and frame timing independent of any display."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from paddleball.ball import Ball, update_ball
from paddleball.config import FRAME_TARGET_TIME
from paddleball.player import Controls, new_left_player, new_right_player, update_players

_FPS_SAMPLE = 100


class Command(enum.Enum):
    """Actions a key press can trigger."""

    QUIT = enum.auto()
    START_BALL = enum.auto()
    TOGGLE_FPS = enum.auto()


@dataclass
class FpsCounter:
    """Averages the frame rate over batches of frames."""

    init_time: int = 0
    frame_count: int = 0
    avg_fps: int = 0

    def reset(self, now: int) -> None:
        """Start a new measurement at time ``now`` (milliseconds)."""
        self.init_time = now
        self.frame_count = 0

    def tick(self, now: int) -> int | None:
        """Count a frame; return the average rate when a batch completes."""
        self.frame_count += 1
        if self.frame_count % _FPS_SAMPLE != 0:
            return None
        elapsed = now - self.init_time
        if elapsed > 0:
            self.avg_fps = int(self.frame_count / (elapsed / 1000))
        self.reset(now)
        return self.avg_fps


def frame_delay(last_frame_time: int, now: int) -> int:
    """Milliseconds to wait so that frames are spaced by the target frame time."""
    wait = last_frame_time + FRAME_TARGET_TIME - now
    return wait if 0 < wait <= FRAME_TARGET_TIME else 0


class GameState:
    """Paddles, ball and the flags that control the main loop."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.left = new_left_player()
        self.right = new_right_player()
        self.ball = Ball()
        self.running = True
        self.fps_enabled = False
        self.fps = FpsCounter()
        self.last_frame_time = 0

    def handle(self, command: Command, now: int = 0) -> None:
        """Apply a command issued at time ``now`` (milliseconds)."""
        if command is Command.QUIT:
            self.running = False
        elif command is Command.START_BALL:
            self.ball.start(self.rng)
        elif command is Command.TOGGLE_FPS:
            self.fps_enabled = not self.fps_enabled
            if self.fps_enabled:
                self.fps.reset(now)

    def update(self, controls: Controls) -> None:
        """Advance paddles and ball by one frame."""
        update_players(self.left, self.right, controls)
        update_ball(self.ball, self.left, self.right)