"""
Tests for the grid geometry and the snake model.
"""

import pytest

from gridsnake.config import UP, DOWN, LEFT, RIGHT
from gridsnake.grid import Grid
from gridsnake.snake import Snake, is_opposite


@pytest.fixture
def grid():
    return Grid(width=500, height=500, unit_size=25)


class TestGrid:
    """Tests for Grid."""

    def test_cols_and_rows(self, grid):
        """Columns and rows count whole cells."""
        assert grid.cols == 20
        assert grid.rows == 20

    def test_contains_edges(self, grid):
        """The last cell is on-board, one unit further is not."""
        assert grid.contains((0, 0))
        assert grid.contains((475, 475))
        assert not grid.contains((500, 0))
        assert not grid.contains((0, -25))

    def test_velocity_scales_direction(self, grid):
        """Unit directions become one-cell pixel steps."""
        assert grid.velocity(RIGHT) == (25, 0)
        assert grid.velocity(UP) == (0, -25)


class TestSnake:
    """Tests for Snake."""

    def test_initial_configuration(self, grid):
        """The starting snake is five cells on the top row moving right."""
        snake = Snake.initial(grid)
        assert snake.segments == [(100, 0), (75, 0), (50, 0), (25, 0), (0, 0)]
        assert snake.velocity == (25, 0)
        assert snake.head == (100, 0)

    @pytest.mark.parametrize("direction", [UP, DOWN, LEFT, RIGHT])
    def test_reversal_is_ignored(self, grid, direction):
        """Asking for the exact opposite direction leaves the velocity alone."""
        snake = Snake([(200, 200)], grid.velocity(direction))
        opposite = grid.velocity((-direction[0], -direction[1]))

        changed = snake.set_direction(opposite)

        assert changed is False
        assert snake.velocity == grid.velocity(direction)

    def test_perpendicular_turn_applies(self, grid):
        """A 90° turn takes effect immediately."""
        snake = Snake.initial(grid)
        assert snake.set_direction(grid.velocity(DOWN)) is True
        assert snake.velocity == (0, 25)

    def test_two_quick_turns_can_reverse(self, grid):
        """Each turn is checked against the current velocity, so UP then LEFT reverses a right-moving snake."""
        snake = Snake.initial(grid)
        snake.set_direction(grid.velocity(UP))
        snake.set_direction(grid.velocity(LEFT))
        assert snake.velocity == (-25, 0)

    def test_advance_without_food_keeps_length(self, grid):
        """Moving drops the tail and adds a head one step ahead."""
        snake = Snake.initial(grid)

        new_head = snake.advance(ate_food=False)

        assert new_head == (125, 0)
        assert snake.segments == [(125, 0), (100, 0), (75, 0), (50, 0), (25, 0)]
        assert len(snake) == 5

    def test_advance_with_food_grows_by_one(self, grid):
        """Eating keeps the tail, so the snake grows by exactly one."""
        snake = Snake.initial(grid)
        snake.set_direction(grid.velocity(DOWN))

        snake.advance(ate_food=True)

        assert snake.head == (100, 25)
        assert len(snake) == 6
        assert snake.segments[-1] == (0, 0)

    def test_advance_ignores_board_edges(self, grid):
        """Movement happily leaves the board; bounds are checked elsewhere."""
        snake = Snake([(0, 0)], grid.velocity(LEFT))
        snake.advance(ate_food=False)
        assert snake.head == (-25, 0)

    def test_is_opposite(self):
        """Only exact negations count as opposite."""
        assert is_opposite((25, 0), (-25, 0))
        assert not is_opposite((25, 0), (0, 25))
        assert not is_opposite((25, 0), (25, 0))
