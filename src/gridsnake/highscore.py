import logging

from .config import CFG
from .store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


class HighScore:
    """
    Best score across sessions, read once and written on every improvement.

    Storage failures never end the game: they are logged and the value is
    kept in memory for the rest of the session.
    """

    def __init__(self, store: KeyValueStore, key: str = CFG.highscore_key):
        self.store = store
        self.key = key
        self.value = 0

    def load(self) -> int:
        try:
            raw = self.store.get(self.key)
        except StoreError as e:
            logger.warning(f"High score unavailable, starting from 0: {e}")
            raw = None

        if raw is None:
            self.value = 0
            return self.value

        try:
            self.value = max(int(raw), 0)
        except ValueError:
            logger.warning(f"Ignoring unreadable high score {raw!r}")
            self.value = 0
        return self.value

    def offer(self, score: int) -> bool:
        """Record `score` if it beats the current best. Returns True when it did."""
        if score <= self.value:
            return False
        self.value = score
        try:
            self.store.set(self.key, str(score))
        except StoreError as e:
            logger.warning(f"Could not persist high score {score}, keeping it in memory: {e}")
        logger.info(f"New high score: {score}")
        return True
