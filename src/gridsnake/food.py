import random
from typing import Optional

from .grid import Cell, Grid


class FoodSpawner:
    """
    Picks food cells uniformly over the board.

    The snake's body is not excluded, so food can land on it. The random
    source is injected so tests can seed or stub it.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()

    def spawn(self) -> Cell:
        unit = self.grid.unit_size
        x = self.rng.randrange(0, self.grid.width - unit + 1, unit)
        y = self.rng.randrange(0, self.grid.height - unit + 1, unit)
        return (x, y)
