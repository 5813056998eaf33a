"""Game flow: two maze stages, the stage change and the final exit."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from enum import Enum

from .console import BLACK, GREEN, WHITE, YELLOW, Console
from .maps import Cell, Grid, show_stage, stage_one, stage_two
from .player import Direction, Player, Pos

ITEMS_NEEDED = 5
STAGE_ONE_START = Pos(11, 2)
STAGE_TWO_START = Pos(1, 28)
NEXT_STAGE_EXIT = Pos(29, 28)
GAME_EXIT = Pos(29, 2)

NEXT_STAGE_MESSAGE = "다음 스테이지로 이동합니다!"
EXIT_OPEN_MESSAGE = "출구가 활성화되었습니다!"
CLEAR_MESSAGE = "★★★★★ Game Clear ★★★★★"
EXIT_ARROW = "←"

_STEP_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_ERASE_SCREEN = "\x1b[2J"
_RESET_STYLE = "\x1b[0m"


class GameStatus(Enum):
    """Whether the game is still running."""

    PLAYING = "playing"
    CLEARED = "cleared"


class Game:
    """Two hidden-wall mazes played one after the other.

    Collect five hearts in the first maze to open the passage to the
    second; collect five stars there to open the final exit.
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self.grids: dict[int, Grid] = {1: stage_one(), 2: stage_two()}
        self.player = Player(STAGE_ONE_START)
        self.status = GameStatus.PLAYING

    @property
    def grid(self) -> Grid:
        """The maze of the stage being played."""
        return self.grids[self.player.stage]

    def _draw_player(self) -> None:
        self.console.set_cursor(self.player.pos.x, self.player.pos.y)
        self.console.set_color(BLACK, GREEN)
        self.console.write(self.player.shape)
        self.console.set_color(BLACK, WHITE)

    def _wipe(self) -> None:
        self.console.write(_ERASE_SCREEN)
        self.console.clear_screen()

    def _open(self, exit_pos: Pos, message_row: int, message: str) -> None:
        self.grid[exit_pos.y][exit_pos.x] = Cell.EMPTY
        self.console.set_cursor(exit_pos.x + 1, exit_pos.y)
        self.console.write(EXIT_ARROW)
        self.console.set_cursor(40, message_row)
        self.console.write(message + "\n")

    def start(self) -> None:
        """Draw the first maze with its inner walls hidden, and the player."""
        show_stage(self.console, self.grids[1], reveal_walls=False)
        self.console.hide_cursor()
        self._draw_player()

    def move(self, directions: Iterable[Direction]) -> None:
        """Apply the pressed directions, always in the order up, down, left, right."""
        if self.status is GameStatus.CLEARED:
            return
        pressed = set(directions)
        if not pressed:
            return
        self.player.prev = self.player.pos
        self.console.set_cursor(self.player.pos.x, self.player.pos.y)
        self.console.write("  ")
        for direction in _STEP_ORDER:
            if direction in pressed:
                self.player.step(self.grid, direction)
        self._draw_player()

    def update(self) -> GameStatus:
        """Open exits once enough items are held and react to reaching them."""
        if self.status is GameStatus.CLEARED:
            return self.status
        player = self.player
        if player.stage == 1:
            if player.hearts >= ITEMS_NEEDED:
                self._open(NEXT_STAGE_EXIT, 1, NEXT_STAGE_MESSAGE)
            if player.pos == NEXT_STAGE_EXIT:
                player.stage = 2
                player.pos = STAGE_TWO_START
                player.prev = STAGE_TWO_START
                player.stars = 0
                self._wipe()
                show_stage(self.console, self.grids[2], reveal_walls=False, star_color=YELLOW)
        elif player.stage == 2:
            if player.stars >= ITEMS_NEEDED:
                self._open(GAME_EXIT, 2, EXIT_OPEN_MESSAGE)
            if player.pos == GAME_EXIT:
                self._wipe()
                self.console.set_cursor(25, 10)
                self.console.write(CLEAR_MESSAGE)
                self.status = GameStatus.CLEARED
        return self.status


def main(argv: list[str] | None = None) -> int:
    """Play the maze in the current terminal with the arrow keys."""
    parser = argparse.ArgumentParser(
        prog="heartmaze",
        description="Find the hidden paths: five hearts open stage two, five stars the exit.",
    )
    parser.parse_args(argv)

    import blessed

    term = blessed.Terminal()
    keys = {
        term.KEY_UP: Direction.UP,
        term.KEY_DOWN: Direction.DOWN,
        term.KEY_LEFT: Direction.LEFT,
        term.KEY_RIGHT: Direction.RIGHT,
    }
    console = Console(sys.stdout)
    game = Game(console)
    try:
        with term.cbreak(), term.hidden_cursor():
            console.write(term.home + term.clear)
            game.start()
            while game.status is GameStatus.PLAYING:
                key = term.inkey(timeout=0.05)
                direction = keys.get(key.code) if key else None
                if direction is not None:
                    game.move([direction])
                    time.sleep(0.1)
                game.update()
    except KeyboardInterrupt:
        pass
    finally:
        console.write(_RESET_STYLE + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())