# game.py
import logging
from enum import Enum
from typing import Callable, Optional, Tuple

from .collision import Collision, evaluate
from .config import CFG, KEY_DIRECTIONS, RESET_KEY
from .food import FoodSpawner
from .grid import Cell, Grid
from .highscore import HighScore
from .render import Renderer
from .scheduler import TickScheduler
from .snake import Snake

logger = logging.getLogger(__name__)

TextSink = Callable[[str], None]


def _discard(text: str) -> None:
    pass


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class GameController:
    """
    Owns one game: snake, food, score and the Idle/Running/Over state.

    Ticks are driven through the injected scheduler; the controller only ever
    keeps one tick pending. Score and high score are pushed to the two text
    sinks whenever they change.
    """

    def __init__(
        self,
        grid: Grid,
        renderer: Renderer,
        scheduler: TickScheduler,
        high_score: HighScore,
        spawner: Optional[FoodSpawner] = None,
        score_sink: Optional[TextSink] = None,
        high_score_sink: Optional[TextSink] = None,
        tick_ms: int = CFG.tick_ms,
    ):
        self.grid = grid
        self.renderer = renderer
        self.scheduler = scheduler
        self.high_score = high_score
        self.spawner = spawner if spawner is not None else FoodSpawner(grid)
        self.score_sink = score_sink or _discard
        self.high_score_sink = high_score_sink or _discard
        self.tick_ms = tick_ms

        self.status = GameStatus.IDLE
        self.faulted = False
        self.score = 0
        self.snake = Snake.initial(grid)
        self.food: Cell = (0, 0)
        self.last_collision = Collision.OK

        self.high_score.load()

    # ---------- Lifecycle ----------
    def start(self) -> None:
        self.status = GameStatus.RUNNING
        self.faulted = False
        self.score = 0
        self.snake = Snake.initial(self.grid)
        self.last_collision = Collision.OK
        self.score_sink(f"Score: {self.score}")
        self.high_score_sink(f"High Score: {self.high_score.value}")
        self.food = self.spawner.spawn()
        self.renderer.draw_food(self.food)
        self.scheduler.call_later(self.tick_ms, self.tick)
        logger.info(f"Game started, food at {self.food}")

    def reset(self) -> None:
        """Start over from any state. Replaces the pending tick, never adds one."""
        self.start()

    # ---------- Input ----------
    def change_direction(self, direction: Tuple[int, int]) -> None:
        if self.status is not GameStatus.RUNNING:
            return
        self.snake.set_direction(self.grid.velocity(direction))

    def handle_key(self, key: int) -> None:
        """Arrow keys steer, R resets, anything else is ignored."""
        if key == RESET_KEY:
            self.reset()
            return
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.change_direction(direction)

    # ---------- Update ----------
    def tick(self) -> None:
        if self.status is not GameStatus.RUNNING:
            return
        try:
            self._step()
        except Exception:
            logger.exception("Tick failed, halting the game loop")
            self.scheduler.cancel()
            self.faulted = True
            self.status = GameStatus.OVER

    def _step(self) -> None:
        self.renderer.clear()
        self.renderer.draw_food(self.food)

        ate_food = self.snake.next_head() == self.food
        self.snake.advance(ate_food)
        if ate_food:
            self._eat()

        self.renderer.draw_snake(self.snake.segments)

        self.last_collision = evaluate(self.snake, self.grid)
        if self.last_collision is not Collision.OK:
            self._game_over()
            return
        self.scheduler.call_later(self.tick_ms, self.tick)

    def _eat(self) -> None:
        self.score += 1
        self.score_sink(f"Score: {self.score}")
        if self.high_score.offer(self.score):
            self.high_score_sink(f"High Score: {self.high_score.value}")
        self.food = self.spawner.spawn()
        logger.debug(f"Ate food, score={self.score}, next food at {self.food}")

    def _game_over(self) -> None:
        self.status = GameStatus.OVER
        self.scheduler.cancel()
        self.renderer.clear()
        self.renderer.draw_game_over(self.score)
        logger.info(
            f"Game over ({self.last_collision.value} collision) "
            f"score={self.score} length={len(self.snake)}"
        )
