from dataclasses import dataclass
from typing import Optional

import pygame  # type: ignore

# ----- Board -----
WIDTH, HEIGHT = 500, 500
UNIT_SIZE = 25
INITIAL_LENGTH = 5

# ----- Colors (style strings, anything pygame.Color accepts) -----
BACKGROUND = "#1e1e1e"
SNAKE_BODY = "#1db954"
SNAKE_BORDER = "#111111"
FOOD = "#ff3e3e"
TEXT = "white"

GAME_OVER_FONT_SIZE = 40

# ----- Directions (dx, dy), scaled by UNIT_SIZE at move time -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Input -----
KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
RESET_KEY = pygame.K_r

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 75
    highscore_path: str = "data/highscore.json"
    highscore_key: str = "highScore"
    log_level: str = "INFO"

CFG = Config()
