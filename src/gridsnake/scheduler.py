from typing import Callable, Optional


class TickScheduler:
    """
    Single-slot timer driven from outside.

    The host calls `run_due(now_ms)` from its frame loop (pygame's
    get_ticks() in the window, any number in tests). At most one callback is
    pending; scheduling another replaces it.
    """

    def __init__(self, now_ms: int = 0):
        self.now_ms = now_ms
        self._due_ms: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._due_ms = self.now_ms + delay_ms
        self._callback = callback

    def cancel(self) -> None:
        self._due_ms = None
        self._callback = None

    def run_due(self, now_ms: int) -> bool:
        """Advance the clock; fire the pending callback if its time has come."""
        self.now_ms = now_ms
        if self._callback is None or now_ms < self._due_ms:
            return False
        callback = self._callback
        self.cancel()
        callback()
        return True
