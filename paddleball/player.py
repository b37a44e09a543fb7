"""Paddles and their keyboard-driven movement."""

from __future__ import annotations

from dataclasses import dataclass

from paddleball.config import (
    PLAYER_HEIGHT,
    PLAYER_INDENT,
    PLAYER_SPEED,
    PLAYER_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Rect,
)


@dataclass
class Player:
    """A paddle and the points it has scored."""

    rect: Rect
    score: int = 0


@dataclass(frozen=True)
class Controls:
    """Which movement keys are held down in the current frame."""

    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False


def _start_y() -> float:
    return float(int(WINDOW_HEIGHT / 2 - PLAYER_HEIGHT / 2))


def new_left_player() -> Player:
    """Create the left paddle, vertically centred."""
    return Player(Rect(PLAYER_INDENT, _start_y(), PLAYER_WIDTH, PLAYER_HEIGHT))


def new_right_player() -> Player:
    """Create the right paddle, vertically centred."""
    x = WINDOW_WIDTH - PLAYER_INDENT - PLAYER_WIDTH
    return Player(Rect(x, _start_y(), PLAYER_WIDTH, PLAYER_HEIGHT))


def _move(player: Player, up: bool, down: bool) -> None:
    rect = player.rect
    if up and rect.y > 0:
        rect.y -= PLAYER_SPEED
    if down and rect.y < WINDOW_HEIGHT - rect.h:
        rect.y += PLAYER_SPEED


def update_players(left: Player, right: Player, controls: Controls) -> None:
    """Move both paddles according to the held keys, keeping them on screen."""
    _move(left, controls.left_up, controls.left_down)
    _move(right, controls.right_up, controls.right_down)