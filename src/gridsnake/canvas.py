# canvas.py
from typing import Dict, List, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore


def to_rgb(color: str) -> Tuple[int, int, int]:
    """Parse a style string ("#1db954", "white", ...) into an RGB triple."""
    c = pygame.Color(color)
    return (c.r, c.g, c.b)


# -----------------------------------------------------------------------------
# Window canvas
# -----------------------------------------------------------------------------
class PygameCanvas:
    """Canvas over a pygame Surface (usually the display surface)."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._fonts: Dict[int, pygame.font.Font] = {}

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        pygame.draw.rect(self.surface, pygame.Color(color), pygame.Rect(x, y, w, h))

    def stroke_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        pygame.draw.rect(self.surface, pygame.Color(color), pygame.Rect(x, y, w, h), width=1)

    def fill_text(self, text: str, cx: int, cy: int, color: str, size: int) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(None, size)
            self._fonts[size] = font
        rendered = font.render(text, True, pygame.Color(color))
        self.surface.blit(rendered, rendered.get_rect(center=(cx, cy)))


# -----------------------------------------------------------------------------
# Headless canvas
# -----------------------------------------------------------------------------
class ArrayCanvas:
    """
    Canvas backed by a (height, width, 3) uint8 numpy array.

    Rectangles are clipped to the buffer, so a head that has just left the
    board draws nothing instead of wrapping around. Text is not rasterized;
    each call is recorded in `texts` as (text, cx, cy).
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.texts: List[Tuple[str, int, int]] = []

    def _clip(self, x: int, y: int, w: int, h: int):
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return None
        return x0, y0, x1, y1

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        box = self._clip(x, y, w, h)
        if box is None:
            return
        x0, y0, x1, y1 = box
        self.pixels[y0:y1, x0:x1] = to_rgb(color)
        if x0 == 0 and y0 == 0 and x1 == self.width and y1 == self.height:
            # a full-surface fill wipes the frame, text included
            self.texts.clear()

    def stroke_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        # one-pixel outline: top, bottom, left, right edges
        self.fill_rect(x, y, w, 1, color)
        self.fill_rect(x, y + h - 1, w, 1, color)
        self.fill_rect(x, y, 1, h, color)
        self.fill_rect(x + w - 1, y, 1, h, color)

    def fill_text(self, text: str, cx: int, cy: int, color: str, size: int) -> None:
        self.texts.append((text, cx, cy))

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))
