# quackplot

quackplot is a small interactive graphing calculator. You type an equation in
`x`, press Enter, and the curve is drawn across the screen. Entered equations
are kept in a history sidebar, and clicking one plots it again.

## Installing

```
pip install .
```

This installs pygame as well.

## Running

```
quackplot
```

Options:

- `--history PATH` — the equation history file (default `history.txt`)
- `--font PATH` — the font file used for all text (default `Jokerman-Regular.ttf`)

The font file must exist; if it cannot be opened the command prints
"Font failed to load" and exits with status 1. The history file is created
if it is missing. Each equation you submit is appended to it, and at start-up
the sidebar shows up to 30 equations read from it.

## Writing equations

An equation is made of:

- numbers such as `2`, `41.72` or `0.5`
- the variable `x`
- the operators `+`, `-`, `*`, `/` and `^`; a `-` at the start, or after
  another operator or `(`, negates what follows
- the functions `sin`, `cos`, `tan`, `arcsin`, `arccos`, `arctan`
- the constant `pi`
- parentheses

Multiplication has to be written out: `2*x`, not `2x`.

Examples: `x^2`, `sin(x)`, `1-tan(2*x+5/8*cos(6*x))`, `68.62*sin(41.72*x^2)`.

An equation that cannot be read is not plotted or saved; the input box shows
"Invalid equation" instead.

The curve is sampled at 600 evenly spaced values of `x` across the visible
range, which starts at -5 to 5 on both axes.

## Keys

| Key         | Action                                          |
|-------------|-------------------------------------------------|
| `\`         | Start or stop typing an equation                |
| Enter       | Plot the typed equation and save it             |
| Backspace   | Delete the last typed character                 |
| `=` (`+`)   | Zoom in by 0.8 on every side (when not typing)  |
| `-`         | Zoom out by 0.8 on every side (when not typing) |
| Left arrow  | Pan one unit left                               |
| Right arrow | Pan one unit right                              |
| `P`         | Show or hide the polar grid (when not typing)   |
| F1          | Show or hide the help box                       |
| Escape      | Quit                                            |

Clicking "CLEAR LIST" in the sidebar empties the history file and the list.
The top line of the sidebar shows the mouse position.

## Using the pieces directly

The expression engine works without the window:

```python
from quackplot.graph_info import tokenize
from quackplot.shunting_yard import to_postfix
from quackplot.rpn import evaluate

postfix = to_postfix(tokenize("x^2-3"))
print(evaluate(postfix, 4))   # 13.0
```

- `quackplot.tokens` — the token classes (`Number`, `Operator`, `Function`,
  `LeftParen`, `RightParen`, ...) and `parse_number`
- `quackplot.graph_info` — `tokenize`, `space_out` and `GraphInfo`, which
  holds the visible range, the number of sample points, the polar flag and the
  current equation
- `quackplot.shunting_yard` — `to_postfix` and `ShuntingYard`
- `quackplot.rpn` — `evaluate` and `RPN`
- `quackplot.plot` — `Plot`, which samples the equation of a `GraphInfo` and
  maps the points to screen pixels
- `quackplot.system` — `System` and `Command`, for panning and zooming
- `quackplot.graph_view`, `quackplot.sidebar`, `quackplot.app` — drawing with
  pygame and the window itself
- `quackplot.particle` — a bouncing ball kept inside the graph area; the
  window does not use it

## What it does not do

- The polar grid is only a backdrop: equations are always plotted as `y`
  against `x`, never as `r` against an angle.
- There is no way to type a range or a sample count; the view changes only
  by zooming and panning.

## Tests

```
pip install .[test]
pytest
```