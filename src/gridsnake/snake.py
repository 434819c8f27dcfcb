from typing import List, Tuple

from .config import INITIAL_LENGTH, RIGHT
from .grid import Cell, Grid


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Snake:
    """
    Body segments from head (index 0) to tail, plus the current velocity.

    The velocity is a pixel step (one unit along one axis). Movement never
    looks at the board edges; that is the collision check's job.
    """

    def __init__(self, segments: List[Cell], velocity: Tuple[int, int]):
        self.segments = list(segments)
        self.velocity = velocity

    @classmethod
    def initial(cls, grid: Grid, length: int = INITIAL_LENGTH) -> "Snake":
        """Straight snake along the top row, head on the right, moving right."""
        unit = grid.unit_size
        segments = [(unit * i, 0) for i in range(length - 1, -1, -1)]
        return cls(segments, grid.velocity(RIGHT))

    @property
    def head(self) -> Cell:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)

    def next_head(self) -> Cell:
        hx, hy = self.head
        dx, dy = self.velocity
        return (hx + dx, hy + dy)

    def set_direction(self, requested: Tuple[int, int]) -> bool:
        """
        Turn unless `requested` is a 180° reversal of the current velocity.

        Compared against the velocity at call time, not at the last tick, so
        two quick turns inside one tick window can still reverse the snake.
        Returns True if the velocity changed.
        """
        if is_opposite(requested, self.velocity):
            return False
        self.velocity = requested
        return True

    def advance(self, ate_food: bool) -> Cell:
        new_head = self.next_head()
        self.segments.insert(0, new_head)
        if not ate_food:
            self.segments.pop()
        return new_head

    def __repr__(self):
        return f"<Snake len={len(self.segments)} head={self.head} velocity={self.velocity}>"
