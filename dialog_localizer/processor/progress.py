import time
from collections.abc import Callable

from dialog_localizer.logging.logger import Log


class ProgressLogger:
    """Logs percentage, rate and ETA every N items or every few seconds."""

    def __init__(
        self,
        total: int,
        *,
        label: str = "Progress",
        every_items: int = 1000,
        every_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._total = total
        self._label = label
        self._every_items = max(1, every_items)
        self._every_seconds = every_seconds
        self._clock = clock
        self._started = clock()
        self._last_logged = self._started

    def tick(self, index: int) -> bool:
        """Report position *index* (0-based). Returns True when a line was logged."""
        now = self._clock()
        if index % self._every_items != 0 and now - self._last_logged <= self._every_seconds:
            return False
        self._last_logged = now
        Log.info(self.describe(index, now))
        return True

    def describe(self, index: int, now: float) -> str:
        elapsed = now - self._started
        percent = index / self._total * 100 if self._total else 100.0
        if index > 0 and elapsed > 0:
            rate = index / elapsed
            eta = f"{(self._total - index) / rate / 60:.1f}m"
        else:
            rate = 0.0
            eta = "?"
        return (
            f"{self._label}: [{percent:.1f}%] {index}/{self._total} "
            f"- {rate:.0f}/s - ETA: {eta}"
        )

    def elapsed(self) -> float:
        return self._clock() - self._started
