# main.py
import argparse
import logging
import random
from typing import List, Optional

import pygame # type: ignore

from .canvas import ArrayCanvas, PygameCanvas
from .config import CFG, Config
from .food import FoodSpawner
from .game import GameController, GameStatus
from .grid import Grid
from .highscore import HighScore
from .render import Renderer
from .scheduler import TickScheduler
from .store import JsonFileStore

logger = logging.getLogger(__name__)


class Caption:
    """Shows the score and high score sinks in the window title."""

    def __init__(self):
        self.score = ""
        self.high_score = ""

    def set_score(self, text: str) -> None:
        self.score = text
        self._refresh()

    def set_high_score(self, text: str) -> None:
        self.high_score = text
        self._refresh()

    def _refresh(self) -> None:
        pygame.display.set_caption(f"Snake | {self.score} | {self.high_score}")


def build_controller(canvas, cfg: Config, grid: Grid, scheduler: TickScheduler,
                     score_sink=None, high_score_sink=None) -> GameController:
    return GameController(
        grid=grid,
        renderer=Renderer(canvas, grid),
        scheduler=scheduler,
        high_score=HighScore(JsonFileStore(cfg.highscore_path), cfg.highscore_key),
        spawner=FoodSpawner(grid, random.Random(cfg.seed)),
        score_sink=score_sink,
        high_score_sink=high_score_sink,
        tick_ms=cfg.tick_ms,
    )


def run_window(cfg: Config) -> None:
    pygame.init()
    grid = Grid()
    screen = pygame.display.set_mode((grid.width, grid.height))
    caption = Caption()
    clock = pygame.time.Clock()

    scheduler = TickScheduler(pygame.time.get_ticks())
    controller = build_controller(
        PygameCanvas(screen), cfg, grid, scheduler,
        score_sink=caption.set_score, high_score_sink=caption.set_high_score,
    )
    controller.start()

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                controller.handle_key(event.key)

        # 2) update + draw (the tick renders its own frame)
        scheduler.run_due(pygame.time.get_ticks())

        # 3) present
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the scheduler

    pygame.quit()


def run_headless(cfg: Config, ticks: int) -> GameController:
    """Run the game without a window or input; the snake just goes straight."""
    grid = Grid()
    scheduler = TickScheduler()
    controller = build_controller(ArrayCanvas(grid.width, grid.height), cfg, grid, scheduler)
    controller.start()
    for _ in range(ticks):
        if controller.status is not GameStatus.RUNNING:
            break
        scheduler.run_due(scheduler.now_ms + cfg.tick_ms)
    logger.info(f"Headless run finished: status={controller.status.value} score={controller.score}")
    return controller


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=CFG.highscore_path,
        help="JSON file holding the persisted high score",
    )
    parser.add_argument("--log-level", type=str, default=CFG.log_level)
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=100, help="ticks to run in --headless mode")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cfg = Config(
        seed=args.seed,
        tick_ms=CFG.tick_ms,
        highscore_path=args.highscore_file,
        highscore_key=CFG.highscore_key,
        log_level=args.log_level,
    )

    if args.headless:
        run_headless(cfg, args.ticks)
    else:
        run_window(cfg)

if __name__ == "__main__":
    main()
