"""Score text and where it is shown."""

from __future__ import annotations

from paddleball.config import WINDOW_WIDTH


def format_score(score: int) -> str:
    """Render a score as at least two digits."""
    return f"{score:02d}"


def score_x_positions() -> tuple[float, float]:
    """Horizontal centres of the left and right score labels."""
    return WINDOW_WIDTH / 4.0, WINDOW_WIDTH - WINDOW_WIDTH / 4.0