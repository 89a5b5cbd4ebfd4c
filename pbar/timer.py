"""Stopwatch used to measure running time and estimate completion."""
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import ETA_UNKNOWN


def format_clock(seconds: Optional[float]) -> str:
    """Format a number of seconds as MM:SS.

    Args:
        seconds: Seconds to format, or None when the value is unknown

    Returns:
        Zero-padded minutes and seconds, or the unknown marker
    """
    if seconds is None:
        return ETA_UNKNOWN
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


@dataclass
class TimeSample:
    """Snapshot of the timer taken by ``Timer.sample``."""
    elapsed: float = 0.0
    minutes: int = 0
    seconds: int = 0
    eta: Optional[int] = None


class Timer:
    """Wall-clock timer started lazily and cleared on reset."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._start: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._start is not None

    def start(self) -> None:
        """Capture the start time; ignored until the next reset."""
        if self._start is None:
            self._start = self._clock()

    def reset(self) -> None:
        self._start = None

    def sample(self, current: int = 0, max_val: int = 0) -> TimeSample:
        """Measure elapsed time and, given progress, a linear ETA.

        The ETA is ``elapsed * max_val / current`` in whole seconds and stays
        None while nothing has completed yet.
        """
        if self._start is None:
            return TimeSample()

        elapsed = max(0.0, self._clock() - self._start)
        whole = int(elapsed)
        eta = None
        if current > 0 and max_val > 0:
            eta = int(elapsed * (max_val / current))
        return TimeSample(
            elapsed=elapsed,
            minutes=whole // 60,
            seconds=whole % 60,
            eta=eta
        )
