# heartmaze

heartmaze is a small maze game for the terminal. You play it with the arrow keys.

## How to play

The game has two stages. Each stage is a 30 × 30 grid.

1. **Stage one.** The inner walls of the maze are hidden, and only the outer
   wall is drawn. Walk around and collect the red hearts (♥). There are five.
   Once you hold all five, an arrow (←) marks an opening in the right-hand
   wall near the bottom, and the message "다음 스테이지로 이동합니다!" appears.
   Step into the opening to reach the next stage.
2. **Stage two.** The inner walls are again hidden. Collect the five yellow
   stars (★). The exit in the right-hand wall near the top then opens, and the
   message "출구가 활성화되었습니다!" appears. Step onto the exit to win. The
   screen then shows "★★★★★ Game Clear ★★★★★" and the game ends.

You are drawn as `옷`. Walls block you. If you press towards a wall, you stay
where you are.

## Installing

```
pip install .
```

Keyboard input and the terminal mode are handled with `blessed`. Drawing uses
ANSI escape sequences, so the game needs a terminal that understands them.

## Running

```
heartmaze
```

Use the arrow keys to move. Press Ctrl-C to quit at any time.

## Using it as a library

You can drive every part of the game without a keyboard.

- `heartmaze.console.Console` writes coloured text at grid positions to any
  text stream. One grid column is two characters wide.
- `heartmaze.maps` holds the layouts:
  - `stage_one()` returns the first stage.
  - `stage_two()` returns the second stage.
  - `exit_stage()` returns a copy of the first layout.

  Each returns a fresh grid of `Cell` values: `EMPTY`, `WALL`, `HEART` or
  `STAR`. `show_stage(console, grid, reveal_walls, star_color)` draws a grid.
  `show_exit(console, grid)` draws only the outer walls and the items.
- `heartmaze.player.Player.step(grid, direction)` moves the player one cell in
  a `Direction`. If the move succeeds and there is a heart or star on the new
  cell, the player picks it up, the item is removed from the grid, and the
  method returns it.
- `heartmaze.game.Game` applies the rules:
  - `start()` draws the first stage.
  - `move(directions)` applies the pressed directions in the order up, down,
    left, right.
  - `update()` opens exits, changes stage and detects the win. It returns a
    `GameStatus`, which is either `PLAYING` or `CLEARED`.
- `heartmaze.placement.ItemPlacer` draws random item coordinates. You can seed
  it for repeatable results.

```python
import io

from heartmaze.console import Console
from heartmaze.game import Game
from heartmaze.player import Direction

game = Game(Console(io.StringIO()))
game.start()
game.move([Direction.RIGHT])
print(game.update())  # GameStatus.PLAYING
```

## What it does not do

The two mazes and their items are fixed. The game does not use
`ItemPlacer` or `exit_stage`/`show_exit`, and it does not scatter items at
random. There are no saved games, scores or timers. Once the game is cleared
or interrupted, it simply ends.

## Running the tests

```
pip install .[test]
pytest
```