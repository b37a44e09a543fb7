# paddleball

A two-player paddle-and-ball game. Two paddles face each other across an
800×600 court; knock the ball past your opponent to score.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and draws the court.

## Playing

Start the game with:

```
paddleball
```

The scores are drawn in pygame's default font. To use another TrueType font,
pass its file:

```
paddleball --font path/to/font.ttf
```

If the font cannot be opened, an error is printed and the game runs without
showing the scores.

Both players share one keyboard:

| Key          | Action                                  |
|--------------|-----------------------------------------|
| `W` / `S`    | Move the left paddle up / down          |
| `↑` / `↓`    | Move the right paddle up / down         |
| `Space`      | Serve the ball when it is at rest       |
| `F`          | Toggle the frames-per-second counter    |
| `Esc`        | Quit                                    |

Closing the window also quits.

The ball is served horizontally in a random direction. Where it strikes a
paddle decides the direction it leaves in; off the left paddle, a hit at the
centre sends it straight back and a hit near either end deflects it by up to
45 degrees. The ball bounces off the top and bottom walls. When it leaves the
court on one side, the player on the other side scores and the ball returns
to the centre, waiting for the next serve.

Each score is shown as at least two digits above its half of the court. The
game aims at 60 frames per second; with the counter switched on, the average
frame rate is printed to the terminal every 100 frames.

## What it does not do

There is no computer opponent, no score limit and no saved results: two
people play on one keyboard until one of them quits.

## Using the pieces

The game rules live apart from the drawing code and can be driven without a
window:

```python
import random

from paddleball.game import Command, GameState
from paddleball.player import Controls

state = GameState(random.Random(1))
state.handle(Command.START_BALL, now=0)
state.update(Controls(left_up=True))
print(state.ball.vel_x, state.left.rect.y, state.left.score)
```

- `paddleball.config` holds the court dimensions, speeds and the `Rect` type.
- `paddleball.player` has `Player`, `Controls`, `new_left_player`,
  `new_right_player` and `update_players`.
- `paddleball.ball` has `Ball` (with `reset`, `start`, `hits_player_y` and
  `bounce_from`) and `update_ball`.
- `paddleball.score` has `format_score` and `score_x_positions`.
- `paddleball.game` has `Command`, `FpsCounter`, `GameState` and
  `frame_delay`.
- `paddleball.app` holds the window, key mapping (`command_for_key`,
  `read_controls`), drawing (`draw`), the loop (`run`) and `main`.

## Running the tests

```
pip install ".[test]"
pytest
```