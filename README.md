# tankbattle

Building blocks for a turn-based battle between two tanks on a rectangular
board whose edges wrap around: directions, board pieces, a board that loads
from a text file and renders itself, and an offensive tank algorithm that
dodges shells, aims, shoots and chases the enemy.

## Installing

```
pip install .
```

## Modules

- `tankbattle.direction` — `Direction`, the eight compass directions
  (`U`, `UR`, `R`, `DR`, `D`, `DL`, `L`, `UL`) with `movement()`,
  `rotate_left()`, `rotate_right()`, `rotate_left_quarter()`,
  `rotate_right_quarter()` and `Direction.parse(code)` (unknown codes give
  `UP`); plus `direction_from_delta`, `action_to_move` and `all_directions`.
- `tankbattle.objects` — `Tank`, `Shell`, `Mine` and `Wall`, all
  `GameObject`s with a `position` and `move_to(x, y)`. A tank starts with 16
  shells, gets a 5-step cooldown after shooting and tracks a backward-move
  counter. A wall is `destroyed` after two hits.
- `tankbattle.board` — `GameBoard(width, height)`: the objects on it,
  `objects_at`, `player_tank`, `wrap`, `is_cell_empty`, `cell_has_wall`,
  `cell_has_obstacle`, rendering with `grid_lines()`, `display()`,
  `write_to_file(path)` and `step_log(step_number)`, and loading with
  `load_from_file(path, errors_path)`.
- `tankbattle.algorithm` — `Action` (the eight actions a tank may take) and
  the abstract `TankAlgorithm` base class with shared helpers
  `is_shell_approaching`, `is_in_direction` and `find_safe_direction`.
- `tankbattle.offensive` — `OffensiveAlgorithm`, whose `next_action(board,
  player_id)` picks an `Action` for that player's tank.

## Board files

The first line holds the width and the height. Each following line is one
row of the board:

| Char | Meaning            |
|------|--------------------|
| `1`  | player 1 tank (faces left)  |
| `2`  | player 2 tank (faces right) |
| `#`  | wall               |
| `@`  | mine               |
| ` `  | empty cell         |

```
8 4
########
#1    @#
#    2 #
########
```

`load_from_file` raises `BoardLoadError` if the file cannot be read, has no
dimensions line, or lacks a tank for either player. Unknown characters,
duplicate tanks, short rows and missing rows are treated as empty space; the
warnings are returned as a list and written to `errors_path` (by default
`input_errors.txt`). A dimensions line that differs from the board's own size
only adds a warning to the returned list.

## Example

```python
from tankbattle.board import GameBoard
from tankbattle.offensive import OffensiveAlgorithm

board = GameBoard(8, 4)
warnings = board.load_from_file("board.txt")

algorithm = OffensiveAlgorithm()
print(algorithm.next_action(board, 1))   # e.g. SHOOT, ROTATE_RIGHT, MOVE_FORWARD
print("\n".join(board.grid_lines()))
```

## What it does not do

- There is no game loop: nothing applies the chosen actions to the tanks,
  moves shells, resolves collisions or decides a winner.
- There is no command-line program to run a game from a board file.
- Only the offensive algorithm is provided; an opponent must be written by
  subclassing `TankAlgorithm`.

## Tests

```
pip install .[test]
pytest
```