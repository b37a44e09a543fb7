import itertools
import random
from collections import defaultdict

import pygame
import pytest

from paddleball.app import command_for_key, draw, read_controls, run
from paddleball.config import BALL_SPEED, WINDOW_HEIGHT, WINDOW_WIDTH
from paddleball.game import Command, GameState


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.event.clear()
    yield screen
    pygame.quit()


def _clock(step=20):
    ticks = itertools.count(0, step)
    return lambda: next(ticks)


@pytest.mark.parametrize(
    "key, command",
    [
        (pygame.K_ESCAPE, Command.QUIT),
        (pygame.K_SPACE, Command.START_BALL),
        (pygame.K_f, Command.TOGGLE_FPS),
    ],
)
def test_command_for_key(key, command):
    assert command_for_key(key) is command


def test_unbound_key_has_no_command():
    assert command_for_key(pygame.K_q) is None


def test_read_controls():
    pressed = defaultdict(bool, {pygame.K_w: True, pygame.K_DOWN: True})
    controls = read_controls(pressed)
    assert (controls.left_up, controls.left_down) == (True, False)
    assert (controls.right_up, controls.right_down) == (False, True)


def test_draw_paints_objects_on_black():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    state = GameState(random.Random(0))
    draw(surface, state, None)
    white = pygame.Color(255, 255, 255, 255)
    black = pygame.Color(0, 0, 0, 255)
    assert surface.get_at((5, 5)) == black
    left = state.left.rect
    assert surface.get_at((int(left.x) + 1, int(left.center_y))) == white
    right = state.right.rect
    assert surface.get_at((int(right.x) + 1, int(right.center_y))) == white
    ball = state.ball.rect
    assert surface.get_at((int(ball.x) + 1, int(ball.y) + 1)) == white


def test_draw_middle_line():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    state = GameState(random.Random(0))
    state.ball.rect.y = 0
    draw(surface, state, None)
    assert surface.get_at((405, WINDOW_HEIGHT // 2 + 100)) == pygame.Color(255, 255, 255, 255)
    assert surface.get_at((405, 10)) == pygame.Color(0, 0, 0, 255)


def test_run_stops_on_quit_event(display):
    state = GameState(random.Random(0))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    run(state, display, None, _clock())
    assert state.running is False
    assert state.last_frame_time > 0


def test_run_serves_ball_on_space(display):
    state = GameState(random.Random(0))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    start_x = state.ball.rect.x
    run(state, display, None, _clock())
    assert abs(state.ball.vel_x) == BALL_SPEED
    assert state.ball.rect.x == start_x + state.ball.vel_x