"""Maze layouts for both stages and the routines that draw them."""

from __future__ import annotations

from enum import IntEnum

from .console import BLACK, RED, WHITE, Console

WALL_GLYPH = "■"
HEART_GLYPH = "♥"
STAR_GLYPH = "★"


class Cell(IntEnum):
    """Contents of one maze square."""

    EMPTY = 0
    WALL = 1
    HEART = 2
    STAR = 3


Grid = list[list[Cell]]

_STAGE_ONE_ROWS = (
    "1111111111 1111111111 1111111111",
    "1000010000 1001001010 0001000021",
    "1001011110 1000001010 1111101001",
    "1001000010 0000000010 0010001001",
    "1001000011 1100100011 1011101001",
    "1001111000 1000100000 1000001001",
    "1000000000 1111110011 1111111001",
    "1000000000 0000100000 1000100001",
    "1111111001 1110000000 0011111001",
    "1000001000 0010000000 1000100001",
    "1100001101 1010001111 1010111001",
    "1000100000 1000000000 1010001001",
    "1110111110 1110001110 1010201001",
    "1000000010 1000001000 1010001001",
    "1111111000 0000001111 1010111001",
    "1000001000 0020000000 0010000001",
    "1111100000 0000000000 0011111001",
    "1000100000 0000000000 0010000001",
    "1111111111 1001111110 0011111001",
    "1200000000 1000000010 0000001001",
    "1000000000 1000111110 0000000001",
    "1111110000 0000000010 0000000001",
    "1000010000 0000000011 1111111101",
    "1000010000 1001001010 0001000001",
    "1111011110 1101011010 1111101001",
    "1001000010 0000100010 0010001001",
    "1201100000 0000111011 1011101001",
    "1000000000 1000100000 1000001001",
    "1000000000 0000000000 0000000001",
    "1111111111 1111111111 1111111111",
)

_STAGE_TWO_ROWS = (
    "1111111111 1111111111 1111111111",
    "1301000010 0001000000 0000100001",
    "1001000010 0001000000 0300100001",
    "1001000010 0001111100 0000100001",
    "1001000010 0000000100 0000100001",
    "1001000000 0000000100 0000100001",
    "1000010000 0000111100 0000100001",
    "1000010000 0000000000 1111100001",
    "1000010000 0000000000 0010000001",
    "1000011111 1111110000 0010000001",
    "1000000000 1000000000 0013000001",
    "1000000000 1000000000 0010000001",
    "1000000000 1000000000 0011110001",
    "1111110000 1000000000 0000010001",
    "1001000000 1111111100 0000010001",
    "1001000000 1000000000 0000010001",
    "1001000111 1000000000 0000010001",
    "1001000000 1000000001 1111110001",
    "1001000000 1000000000 0000000001",
    "1001000000 1000011110 0000000001",
    "1001000000 0000010310 0000000001",
    "1001111110 0000010010 0000000001",
    "1000001000 0000010010 0000000001",
    "1000001000 0111110010 0000001111",
    "1000001000 0000000010 0000001001",
    "1000301000 1111111110 0000001001",
    "1000000000 0000000000 0000001001",
    "1000000000 0000000000 1111111001",
    "1000000000 0000000000 0000000001",
    "1111111111 1111111111 1111111111",
)


def _parse(rows: tuple[str, ...]) -> Grid:
    grid = [[Cell(int(ch)) for ch in row.replace(" ", "")] for row in rows]
    widths = {len(row) for row in grid}
    if len(widths) != 1:
        raise ValueError("maze rows differ in length")
    return grid


def stage_one() -> Grid:
    """A fresh copy of the first stage, holding five hearts."""
    return _parse(_STAGE_ONE_ROWS)


def stage_two() -> Grid:
    """A fresh copy of the second stage, holding five stars."""
    return _parse(_STAGE_TWO_ROWS)


def exit_stage() -> Grid:
    """A fresh copy of the layout drawn when the exit is revealed."""
    return _parse(_STAGE_ONE_ROWS)


def _is_border(grid: Grid, x: int, y: int) -> bool:
    return x in (0, len(grid[y]) - 1) or y in (0, len(grid) - 1)


def show_stage(
    console: Console,
    grid: Grid,
    reveal_walls: bool = False,
    star_color: int | None = None,
) -> None:
    """Draw a stage cell by cell.

    Outer walls are always white. Inner walls are drawn white when
    ``reveal_walls`` is true and black on black otherwise, which hides the
    maze. Stars take ``star_color`` when one is given.
    """
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            console.set_cursor(x, y)
            if cell is Cell.WALL:
                if _is_border(grid, x, y) or reveal_walls:
                    console.set_color(BLACK, WHITE)
                else:
                    console.set_color(BLACK, BLACK)
                console.write(WALL_GLYPH)
            elif cell is Cell.EMPTY:
                console.write(" ")
            elif cell is Cell.HEART:
                console.set_color(BLACK, RED)
                console.write(HEART_GLYPH)
                console.set_color(BLACK, WHITE)
            elif cell is Cell.STAR:
                if star_color is None:
                    console.write(STAR_GLYPH)
                else:
                    console.set_color(BLACK, star_color)
                    console.write(STAR_GLYPH)
                    console.set_color(BLACK, WHITE)


def show_exit(console: Console, grid: Grid) -> None:
    """Draw only the outer walls and the items, leaving inner walls blank."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            console.set_cursor(x, y)
            if cell is Cell.WALL:
                if _is_border(grid, x, y):
                    console.set_color(BLACK, WHITE)
                    console.write(WALL_GLYPH)
                else:
                    console.set_color(BLACK, BLACK)
                    console.write(" ")
            elif cell is Cell.EMPTY:
                console.write(" ")
            elif cell is Cell.HEART:
                console.set_color(BLACK, RED)
                console.write(HEART_GLYPH)
                console.set_color(BLACK, WHITE)
            elif cell is Cell.STAR:
                console.write(STAR_GLYPH)