from enum import Enum

from .grid import Grid
from .snake import Snake


class Collision(Enum):
    OK = "ok"
    WALL = "wall"
    SELF = "self"


def evaluate(snake: Snake, grid: Grid) -> Collision:
    """Check the head against the board edges, then against the rest of the body."""
    if not grid.contains(snake.head):
        return Collision.WALL
    if snake.head in snake.segments[1:]:
        return Collision.SELF
    return Collision.OK
