"""The player: position, collected items and movement through a maze."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .maps import Cell, Grid

PLAYER_GLYPH = "옷"


class Direction(Enum):
    """A single step on the grid, as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Pos:
    """A grid cell, column first."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Pos:
        """The neighbouring cell in the given direction."""
        return Pos(self.x + direction.dx, self.y + direction.dy)


def _cell_at(grid: Grid, pos: Pos) -> Cell:
    if 0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[pos.y]):
        return grid[pos.y][pos.x]
    return Cell.WALL


@dataclass
class Player:
    """Where the player stands and what has been collected so far."""

    pos: Pos
    hearts: int = 0
    stars: int = 0
    stage: int = 1
    shape: str = PLAYER_GLYPH
    prev: Pos = field(init=False)

    def __post_init__(self) -> None:
        self.prev = self.pos

    def step(self, grid: Grid, direction: Direction) -> Cell | None:
        """Try to move one cell and pick up whatever lies there.

        Walls, and anything off the grid, block the move. A heart or star
        is counted and removed from the grid; the item taken is returned,
        otherwise None.
        """
        target = self.pos.moved(direction)
        cell = _cell_at(grid, target)
        if cell is Cell.WALL:
            return None
        self.pos = target
        if cell is Cell.HEART:
            self.hearts += 1
        elif cell is Cell.STAR:
            self.stars += 1
        else:
            return None
        grid[target.y][target.x] = Cell.EMPTY
        return cell