# solong_game

A small top-down puzzle game played in a pygame window. The player walks
around a map read from a `.ber` file, picks up every collectable and then
steps onto the exit to win.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
solong --bonus path/to/level.ber
```

`--bonus` must come first. It turns on bonus mode, which adds:

- enemy tiles (`M`): stepping onto one loses the game,
- a player sprite that faces the direction of the last move,
- arrow-key controls in addition to WASD,
- inner walls that switch between two textures every 400 frames,
- a move counter drawn in the top-left corner of the window.

Outside bonus mode the move count is printed to standard output after each
move (`PLAYER MOVES : n`).

Controls:

- `W` `A` `S` `D` move up, left, down and right (bonus mode also accepts the arrow keys)
- `Esc` quits
- closing the window quits

Stepping onto the exit while collectables remain is refused like a wall.
Once all are collected, stepping onto the exit wins the game. `YOU WON`,
`YOU LOST!` or `ESC PRESSED` is printed when the game ends.

If the command gets no map, or a path that does not end in `.ber`, it prints
`INSERT MAP!` or `NOT BER MAP` and stops. A map that cannot be read or is
rejected has its reason printed.

### Textures

The game loads its images from a `textures/` directory in the current
working directory. It needs these files:

| Name        | File            |
|-------------|-----------------|
| player      | `pikachu.xpm`   |
| inner wall  | `walls.xpm`     |
| exit        | `exit.xpm`      |
| bottom wall | `rocks.xpm`     |
| top wall    | `sea.xpm`       |
| collectable | `rarecandy.xpm` |
| floor       | `sand.xpm`      |

Bonus mode also needs `right.xpm`, `up.xpm` and `down.xpm` for the facing
player sprites, `wall2.xpm` for the alternate inner wall and `enemy.xpm`.
If any file fails to load, `ERROR WHILE LOADING IMAGE!` is printed and the
game stops. Every tile is 48 pixels square.

## Map format

A map is a plain text file with a `.ber` extension, one row per line. Every
line must have the same length, counting its newline. That means the last
row needs a trailing newline as well. The map must have at least three rows.
Tiles:

| Char | Meaning            |
|------|--------------------|
| `1`  | wall               |
| `0`  | floor              |
| `P`  | player start       |
| `E`  | exit               |
| `C`  | collectable        |
| `M`  | enemy (bonus only) |

A map is accepted only if it:

- has exactly one `P` and exactly one `E`,
- has at least one `C`,
- is enclosed by walls (first and last rows and columns are all `1`),
- uses no other characters,
- has at least one `0`,
- lets the player reach every `C` from `P`, moving in four directions
  without passing through walls, enemies or the exit.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong_game.mapfile import load_map
from solong_game.validation import validate_map
from solong_game.game import Game, Direction, Outcome

grid = load_map("level.ber")            # list of rows, newlines stripped
start = validate_map(grid, bonus=False)  # player's (x, y)
game = Game(grid, bonus=False)
outcome = game.move(Direction.RIGHT)     # Outcome.MOVED, BLOCKED, WON or LOST
```

- `solong_game.mapfile`
  - `load_map(path)` and `read_lines(path)` raise `MapError` for files that
    cannot be opened or whose rows differ in length.
  - `load_map` also rejects maps with too few rows.
  - `has_ber_extension(path)` checks the file name.
  - `LineReader(stream, buffer_size)` splits a text or binary stream into
    lines, reading in chunks.
- `solong_game.validation`
  - `validate_map(grid, bonus)` raises `InvalidMap` with a message naming
    the broken rule.
  - The rule checks are available on their own: `find_player`, `count_tile`,
    `check_walls`, `check_characters` and `flood_fill`.
- `solong_game.game`
  - `Game` tracks `position`, `remaining` collectables, `moves`, `facing`
    and `outcome`.
  - Moving after a win or loss raises `GameOver`.
  - `direction_for_key(key, bonus)` maps key names such as `"w"` or `"up"`
    to a `Direction`.
- `solong_game.app`
  - `Renderer(game)` draws a game onto a pygame surface with `draw(surface)`.
  - `run(path, bonus)` plays a map in a window.
  - `main(argv)` is the `solong` command.
- `solong_game.cformat`
  - `c_format(fmt, *args)` and `c_printf(fmt, *args)` format text with the
    conversions `%c %s %p %d %i %u %x %X %%`.

## What it does not do

Enemies stand still; they never move on their own. There is no sound, no
level selection and no saving of progress. Exactly one map is played per run.