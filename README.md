# termarcade

Two small arcade games that run in a text terminal:

- **Space Invaders**: move along the bottom of an 80x30 screen and shoot the
  row of twenty aliens (`X`) before their fire (`$`) reaches your cannon (`^`).
  Barrier blocks (`=`) stop your shots. A barrier block hit by alien fire is
  destroyed, and the alien shot is destroyed with it.
- **Frogger**: on a 30x16 screen, get the frog (`8`) from the bottom to the
  top row without landing on a moving obstacle (`~` on the upper lanes, `=`
  on the lower ones).

## Installing

```
pip install .
```

## Playing

```
termarcade
```

The command accepts one option:

```
termarcade --delay SECONDS
```

`--delay` sets the pause between frames (default 1/30 of a second; it must
not be negative).

A start screen asks you to type a number and press Enter:

```
1. Space Invaders
2. Frogger
3. Quit
```

Anything else prints "Invalid choice" and waits for you to press Enter
before asking again.

### Controls

| Game           | Keys                                   |
|----------------|----------------------------------------|
| Space Invaders | `A` / `D` to move, `Space` to fire     |
| Frogger        | `W` / `A` / `S` / `D` to hop one cell  |

Only one player shot can be in flight at a time. In Frogger each press moves
the frog one cell; a frame with no key pressed is needed before the next hop.

In Space Invaders, clearing every alien wins and being hit by alien fire
ends the game. In Frogger, reaching the top row wins and touching an
obstacle ends the game. Either way a "YOU WIN!" or "GAME OVER!" message is
printed and the program exits.

## Using it as a library

The pieces can be driven directly. `termarcade.game.Game` takes an optional
`window` (a `termarcade.screen.ConsoleWindow`, which writes to any text
stream), `menu`, `keys` (a callable returning the keys held this frame),
`rng` and `frame_delay`. `Game.step` advances one frame given the set of
keys currently held:

```python
import io

from termarcade.game import Game, GameState
from termarcade.screen import ConsoleWindow

game = Game(window=ConsoleWindow(io.StringIO()))
game.initialise()
game.set_state(GameState.FROGGER)
game.step({"w"})
print(game.frogger.cell)   # (15, 13)
print("\n".join(game.front.lines()))
```

Other building blocks:

- `termarcade.entities`: `GameObject`, `Alien`, `AlienAttack`, `Barrier`,
  `Missile`, `Player`, `FroggerPlayer`, `Ground`.
- `termarcade.obstacles`: `Obstacle` and `ObstacleField`, a fixed pool of
  obstacle cells laid out lane by lane with `set_lane`.
- `termarcade.screen`: `ScreenBuffer`, a grid of single characters addressed
  as `(x, y)`, and `ConsoleWindow`, which drives the terminal with ANSI
  escape sequences.
- `termarcade.menu`: `Menu` and `MenuChoice` for the start screen.

## Limitations

- The aliens do not move: their shared speed is zero, so they stay on their
  starting row.
- There are no levels, scores or lives; one game is played per run.
- Key presses are read from a terminal (cbreak mode on POSIX, the console on
  Windows). When standard input is not a terminal no keys are read.
- The window title and size are requested with escape sequences that not
  every terminal honours.

## Running the tests

```
pip install .[test]
pytest
```