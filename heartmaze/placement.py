"""Random positions for scattering items across a maze."""

from __future__ import annotations

import random
import time


class ItemPlacer:
    """Draws item coordinates from a seeded random source.

    Without a seed one is taken from the clock, reduced to one of twenty
    values, so that each game can lay items out differently.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(time.time()) % 20
        self.seed = seed
        self._rng = random.Random(seed)

    def pos_x(self) -> int:
        """A column between 2 and 23; even draws are kept, odd ones shift by two."""
        value = self._rng.randrange(20) + 2
        return value if value % 2 == 0 else value + 2

    def pos_y(self) -> int:
        """A row between 0 and 19."""
        return self._rng.randrange(20)