"""Window, input, rendering and the main loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

import pygame

from paddleball.config import (
    MIDDLE_LINE_INDENT,
    MIDDLE_LINE_WIDTH,
    SCORE_FONT_SIZE,
    SCORE_TOP,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    Rect,
)
from paddleball.game import Command, GameState, frame_delay
from paddleball.player import Controls
from paddleball.score import format_score, score_x_positions

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)

_KEY_COMMANDS = {
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_SPACE: Command.START_BALL,
    pygame.K_f: Command.TOGGLE_FPS,
}


def command_for_key(key: int) -> Command | None:
    """The command bound to a key, or None."""
    return _KEY_COMMANDS.get(key)


def read_controls(pressed) -> Controls:
    """Build paddle controls from a pressed-keys mapping indexed by key code."""
    return Controls(
        left_up=bool(pressed[pygame.K_w]),
        left_down=bool(pressed[pygame.K_s]),
        right_up=bool(pressed[pygame.K_UP]),
        right_down=bool(pressed[pygame.K_DOWN]),
    )


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))


def _draw_score(surface: pygame.Surface, font: pygame.font.Font, score: int, x: float) -> None:
    text = font.render(format_score(score), True, WHITE)
    surface.blit(text, (x - text.get_width() // 2, SCORE_TOP))


def draw(surface: pygame.Surface, state: GameState, font: pygame.font.Font | None) -> None:
    """Render one frame of the game onto ``surface``."""
    surface.fill(BLACK)
    line_x = WINDOW_WIDTH / 2 + MIDDLE_LINE_WIDTH / 2
    pygame.draw.line(
        surface,
        WHITE,
        (line_x, MIDDLE_LINE_INDENT),
        (line_x, WINDOW_HEIGHT - MIDDLE_LINE_INDENT),
    )
    for rect in (state.left.rect, state.right.rect, state.ball.rect):
        pygame.draw.rect(surface, WHITE, _to_pygame(rect))
    if font is not None:
        left_x, right_x = score_x_positions()
        _draw_score(surface, font, state.left.score, left_x)
        _draw_score(surface, font, state.right.score, right_x)


def _process_events(state: GameState, now: int) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            state.handle(Command.QUIT, now)
        elif event.type == pygame.KEYDOWN:
            command = command_for_key(event.key)
            if command is not None:
                state.handle(command, now)


def run(
    state: GameState,
    screen: pygame.Surface,
    font: pygame.font.Font | None,
    clock: Callable[[], int] = pygame.time.get_ticks,
) -> None:
    """Run frames until the state stops; ``clock`` returns milliseconds."""
    while state.running:
        _process_events(state, clock())
        wait = frame_delay(state.last_frame_time, clock())
        if wait:
            pygame.time.wait(wait)
        state.last_frame_time = clock()
        if state.fps_enabled:
            average = state.fps.tick(state.last_frame_time)
            if average is not None:
                print(f"FPS: {average}")
        state.update(read_controls(pygame.key.get_pressed()))
        draw(screen, state, font)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until the window is closed."""
    parser = argparse.ArgumentParser(description="Two-player paddle and ball game.")
    parser.add_argument("--font", help="TrueType font file for the scores")
    args = parser.parse_args(argv)

    try:
        pygame.display.init()
        pygame.font.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            font = pygame.font.Font(args.font, SCORE_FONT_SIZE)
        except (OSError, pygame.error) as exc:
            print(f"Error opening font: {exc}", file=sys.stderr)
            font = None
        run(GameState(), screen, font)
    except pygame.error as exc:
        print(f"Error initializing display: {exc}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())