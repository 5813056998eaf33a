import io

import pytest

from heartmaze.console import Console
from heartmaze.game import (
    CLEAR_MESSAGE,
    EXIT_ARROW,
    EXIT_OPEN_MESSAGE,
    GAME_EXIT,
    NEXT_STAGE_EXIT,
    NEXT_STAGE_MESSAGE,
    STAGE_ONE_START,
    STAGE_TWO_START,
    Game,
    GameStatus,
)
from heartmaze.maps import Cell
from heartmaze.player import Direction, Pos


@pytest.fixture
def game():
    out = io.StringIO()
    g = Game(Console(out))
    g.out = out
    return g


def test_initial_state(game):
    assert game.player.pos == Pos(11, 2)
    assert game.player.stage == 1
    assert game.status is GameStatus.PLAYING
    assert game.grid is game.grids[1]


def test_start_draws_player(game):
    game.start()
    text = game.out.getvalue()
    assert "옷" in text
    assert "♥" in text
    assert "\x1b[?25l" in text


def test_move_without_keys_draws_nothing(game):
    game.move([])
    assert game.out.getvalue() == ""
    assert game.player.pos == STAGE_ONE_START


def test_moves_apply_in_fixed_order(game):
    # Left is tried before right; left of the start is a wall.
    game.move([Direction.RIGHT, Direction.LEFT])
    assert game.player.pos == Pos(STAGE_ONE_START.x + 1, STAGE_ONE_START.y)
    assert game.player.prev == STAGE_ONE_START


def test_move_into_wall_stays(game):
    game.move([Direction.LEFT])
    assert game.player.pos == STAGE_ONE_START


def test_hearts_open_passage_and_change_stage(game):
    assert game.grids[1][NEXT_STAGE_EXIT.y][NEXT_STAGE_EXIT.x] is Cell.WALL
    game.player.hearts = 5
    game.player.pos = Pos(28, 28)
    assert game.update() is GameStatus.PLAYING
    assert game.grids[1][NEXT_STAGE_EXIT.y][NEXT_STAGE_EXIT.x] is Cell.EMPTY
    assert NEXT_STAGE_MESSAGE in game.out.getvalue()
    assert EXIT_ARROW in game.out.getvalue()

    game.move([Direction.RIGHT])
    assert game.player.pos == NEXT_STAGE_EXIT
    game.update()
    assert game.player.stage == 2
    assert game.player.pos == STAGE_TWO_START
    assert game.player.stars == 0
    assert game.grid is game.grids[2]


def test_passage_stays_closed_with_too_few_hearts(game):
    game.player.hearts = 4
    game.update()
    assert game.grids[1][NEXT_STAGE_EXIT.y][NEXT_STAGE_EXIT.x] is Cell.WALL
    assert NEXT_STAGE_MESSAGE not in game.out.getvalue()


def test_stars_open_exit_and_clear(game):
    game.player.stage = 2
    game.player.stars = 5
    game.player.pos = Pos(28, 2)
    assert game.update() is GameStatus.PLAYING
    assert game.grids[2][GAME_EXIT.y][GAME_EXIT.x] is Cell.EMPTY
    assert EXIT_OPEN_MESSAGE in game.out.getvalue()

    game.move([Direction.RIGHT])
    assert game.player.pos == GAME_EXIT
    assert game.update() is GameStatus.CLEARED
    assert CLEAR_MESSAGE in game.out.getvalue()


def test_moves_ignored_after_clear(game):
    game.player.stage = 2
    game.player.stars = 5
    game.player.pos = Pos(28, 2)
    game.update()
    game.move([Direction.RIGHT])
    game.update()
    game.move([Direction.LEFT])
    assert game.player.pos == GAME_EXIT
    assert game.update() is GameStatus.CLEARED


def test_exit_closed_with_too_few_stars(game):
    game.player.stage = 2
    game.player.stars = 4
    game.update()
    assert game.grids[2][GAME_EXIT.y][GAME_EXIT.x] is Cell.WALL


def test_collected_hearts_counted_through_move(game):
    game.player.pos = Pos(27, 1)
    game.move([Direction.RIGHT])
    assert game.player.hearts == 1
    assert game.grids[1][1][28] is Cell.EMPTY