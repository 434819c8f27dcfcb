"""
Tests for the renderer against the headless numpy canvas.
"""

import numpy as np
import pytest

from gridsnake.canvas import ArrayCanvas, to_rgb
from gridsnake.config import BACKGROUND, FOOD, SNAKE_BODY, SNAKE_BORDER
from gridsnake.grid import Grid
from gridsnake.render import Renderer


@pytest.fixture
def canvas():
    return ArrayCanvas(500, 500)


@pytest.fixture
def renderer(canvas):
    return Renderer(canvas, Grid(width=500, height=500, unit_size=25))


class TestRenderer:

    def test_clear_fills_background(self, canvas, renderer):
        """clear() paints every pixel with the background color."""
        renderer.clear()
        assert canvas.pixel(0, 0) == to_rgb(BACKGROUND)
        assert canvas.pixel(499, 499) == to_rgb(BACKGROUND)
        assert np.all(canvas.pixels == np.array(to_rgb(BACKGROUND), dtype=np.uint8))

    def test_snake_cell_has_fill_and_border(self, canvas, renderer):
        """Snake segments are filled squares with a one-pixel border."""
        renderer.draw_snake([(50, 25)])
        assert canvas.pixel(50, 25) == to_rgb(SNAKE_BORDER)
        assert canvas.pixel(74, 49) == to_rgb(SNAKE_BORDER)
        assert canvas.pixel(62, 37) == to_rgb(SNAKE_BODY)
        assert canvas.pixel(75, 25) == (0, 0, 0)

    def test_food_cell_has_no_border(self, canvas, renderer):
        """Food is a plain filled square."""
        renderer.draw_food((100, 100))
        assert canvas.pixel(100, 100) == to_rgb(FOOD)
        assert canvas.pixel(112, 112) == to_rgb(FOOD)

    def test_off_board_cell_is_clipped(self, canvas, renderer):
        """A head past the edge draws nothing and does not wrap around."""
        renderer.draw_snake([(-25, 0), (500, 0)])
        assert not canvas.pixels.any()

    def test_game_over_text_is_centered(self, canvas, renderer):
        """The terminal message sits around the middle of the board."""
        renderer.clear()
        renderer.draw_game_over(3)
        assert canvas.texts == [("GAME OVER", 250, 230), ("Score: 3", 250, 290)]

    def test_clear_wipes_text(self, canvas, renderer):
        """A new frame removes the previous game-over text."""
        renderer.draw_game_over(1)
        renderer.clear()
        assert canvas.texts == []


def test_to_rgb_accepts_names_and_hex():
    """Style strings may be hex codes or color names."""
    assert to_rgb("#1e1e1e") == (30, 30, 30)
    assert to_rgb("white") == (255, 255, 255)
