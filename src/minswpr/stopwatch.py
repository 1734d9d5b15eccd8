"""
Stopwatch for timing a round of Minesweeper.
"""
import time
from typing import Callable, Optional


class Stopwatch:
    """
    Tracks the elapsed time during an active game.

    Once stopped, ``elapsed`` keeps returning the time at which it was
    stopped until the stopwatch is started again or reset.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._elapsed_final = 0.0

    def start(self) -> None:
        """Start timing from zero."""
        self._started_at = self._clock()
        self._elapsed_final = 0.0

    def stop(self) -> None:
        """Freeze the elapsed time."""
        self._elapsed_final = self.elapsed
        self._started_at = None

    def reset(self) -> None:
        self._started_at = None
        self._elapsed_final = 0.0

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        """Seconds since ``start``, or the frozen value after ``stop``."""
        if self._started_at is None:
            return self._elapsed_final
        return self._clock() - self._started_at
