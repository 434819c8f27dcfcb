from dataclasses import dataclass
from typing import Tuple

from .config import WIDTH, HEIGHT, UNIT_SIZE

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Board geometry in pixels. Every cell coordinate is a multiple of unit_size."""
    width: int = WIDTH
    height: int = HEIGHT
    unit_size: int = UNIT_SIZE

    @property
    def cols(self) -> int:
        return self.width // self.unit_size

    @property
    def rows(self) -> int:
        return self.height // self.unit_size

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def velocity(self, direction: Tuple[int, int]) -> Tuple[int, int]:
        """Scale a unit direction like (1, 0) to a per-tick pixel step."""
        dx, dy = direction
        return (dx * self.unit_size, dy * self.unit_size)
