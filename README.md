# cafelogico

A small terminal puzzle game. A logical expression such as `A ∧ ¬B` is shown
at the top of the board, and four `V`/`F` tokens are scattered across it. Walk
over the tokens in the order of the expression's truth table (rows `00`, `01`,
`10`, `11`) to solve it. Each right token scores `100 × multiplier` and raises
the multiplier by one. A wrong token resets the multiplier to 1, scatters the
tokens again, moves the freeze item and costs a life.

Along the way:

- two ghosts chase you; when one reaches you, you lose a life, your multiplier
  resets, you go back to the centre of the board and the ghosts go back to
  where they started;
- the 🥶 item freezes the ghosts for five seconds;
- the ☕ item gives an extra life.

There are three levels of increasing difficulty; solving the third one ends the
game. Your final score is appended to `ranking.txt` in the current directory,
and the ten best scores found there are shown when the game ends. The game text
is in Portuguese.

## Installing

```
pip install .
```

Only the standard library is used. The game needs a POSIX terminal (it uses
`termios`) of at least 80×24 characters that understands ANSI escape codes.

## Playing

```
cafelogico
```

Type your name and press ENTER; only the first word is kept, up to 49
characters. Then:

| Key | Action     |
|-----|------------|
| `w` | move up    |
| `s` | move down  |
| `a` | move left  |
| `d` | move right |
| `q` | quit       |

The game also ends when you run out of lives or after about 1000 ticks of its
100 ms timer. Press ENTER on the final screen to leave.

## Using it as a library

The modules can be used on their own:

- `cafelogico.screen` – `Screen`, which writes ANSI cursor, colour and
  box-drawing sequences to any text stream, and the `Color` enum;
- `cafelogico.timer` – `Timer`, a millisecond interval timer with an
  injectable clock;
- `cafelogico.keyboard` – `Keyboard`, a context manager that puts a terminal
  into non-canonical, no-echo mode and reads single keys;
- `cafelogico.expressions` – `LogicalExpression`, `expressions_for_level()` and
  `random_expression()`;
- `cafelogico.coffee`, `cafelogico.freeze`, `cafelogico.ghosts` – the pickups
  and the chasing ghosts;
- `cafelogico.stage_screen` – `show_stage()`, the banner between levels;
- `cafelogico.game` – `Game`, `main()`, and `save_ranking()`,
  `load_ranking()` and `render_ranking()` for the score file.

```python
import io
import random

from cafelogico.expressions import random_expression
from cafelogico.screen import Screen, Color

expr = random_expression(2, random.Random(1))
print(expr.text, expr.truth_table)

out = io.StringIO()
screen = Screen(out)
screen.set_color(Color.YELLOW, Color.BLACK)
screen.gotoxy(10, 5)
screen.write("hello")
```

`Game` takes its screen, random generator, clock and sleep function as
arguments, and its `ranking_path` attribute chooses the score file, so a game
can be driven step by step with `move_player()`, `check_logic_collision()`,
`tick()` and `render()`, or played through `run()` with any object offering
`hit()`/`read()` for keys and `time_over()` for ticks.

`load_ranking()` returns entries best first and raises `FileNotFoundError`
when the file does not exist.

## What it does not do

There is no colour or size detection, no Windows console support and no
sound; the score file is a plain text file with one `name points` line per
game and is never trimmed.

## Running the tests

```
pip install .[test]
pytest
```