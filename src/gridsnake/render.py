from typing import Iterable, Optional, Protocol

from .config import (
    BACKGROUND, SNAKE_BODY, SNAKE_BORDER, FOOD, TEXT,
    GAME_OVER_FONT_SIZE,
)
from .grid import Cell, Grid


class Canvas(Protocol):
    """Raster surface the renderer draws on. Colors are style strings."""
    width: int
    height: int

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None: ...
    def stroke_rect(self, x: int, y: int, w: int, h: int, color: str) -> None: ...
    def fill_text(self, text: str, cx: int, cy: int, color: str, size: int) -> None: ...


class Renderer:
    """Turns game state into draw calls. Holds no state beyond the canvas."""

    def __init__(self, canvas: Canvas, grid: Grid):
        self.canvas = canvas
        self.grid = grid

    def clear(self) -> None:
        self.canvas.fill_rect(0, 0, self.canvas.width, self.canvas.height, BACKGROUND)

    def draw_cell(self, cell: Cell, fill: str, border: Optional[str] = None) -> None:
        x, y = cell
        unit = self.grid.unit_size
        self.canvas.fill_rect(x, y, unit, unit, fill)
        if border is not None:
            self.canvas.stroke_rect(x, y, unit, unit, border)

    def draw_food(self, cell: Cell) -> None:
        self.draw_cell(cell, FOOD)

    def draw_snake(self, segments: Iterable[Cell]) -> None:
        for segment in segments:
            self.draw_cell(segment, SNAKE_BODY, SNAKE_BORDER)

    def draw_game_over(self, score: int) -> None:
        cx = self.canvas.width // 2
        cy = self.canvas.height // 2
        self.canvas.fill_text("GAME OVER", cx, cy - 20, TEXT, GAME_OVER_FONT_SIZE)
        self.canvas.fill_text(f"Score: {score}", cx, cy + 40, TEXT, GAME_OVER_FONT_SIZE)
