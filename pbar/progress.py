"""Progress bar controller."""

import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Dict, Optional, TextIO

from .constants import (
    DEFAULT_BAR_WIDTH,
    DEFAULT_INDICATOR_CHAR,
    DEFAULT_INTERVAL,
    DEFAULT_MARQUEE_WIDTH,
    DEFAULT_MESSAGE_WIDTH
)
from .errors import ConfigError
from .renderer import Marquee, Renderer, format_message
from .timer import Timer, TimeSample


class Mode(Enum):
    """Display mode of a progress bar."""
    DETERMINATE = 'determinate'
    INDETERMINATE = 'indeterminate'


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return value


def _indicator(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError(f"Indicator must be a single character, got {value!r}")
    return value


class ProgressBar:
    """Text progress bar redrawn in place on a console stream.

    In determinate mode the bar is redrawn synchronously on every update. In
    indeterminate mode ``start`` launches a background thread that sweeps a
    marquee across the track until ``finish``, ``stop`` or a mode switch.
    """

    def __init__(self, message: str = "Processing", max_val: Optional[int] = None,
                 config: Dict[str, Any] = None, stream: Optional[TextIO] = None,
                 clock: Callable[[], float] = time.monotonic):
        """Initialize progress bar.

        Args:
            message: Text to show in front of the bar
            max_val: Value marking 100%; selects determinate mode when given
            config: Configuration dictionary (see ``read_config``)
            stream: Stream to draw on (defaults to stderr)
            clock: Time source in seconds
        """
        self.config = config or {}
        self.bar_width = _positive_int('barWidth', self.config.get('barWidth', DEFAULT_BAR_WIDTH))
        self.message_width = _positive_int('messageWidth', self.config.get('messageWidth', DEFAULT_MESSAGE_WIDTH))
        self.marquee_width = _positive_int('marqueeWidth', self.config.get('marqueeWidth', DEFAULT_MARQUEE_WIDTH))
        self.interval = self.config.get('interval', DEFAULT_INTERVAL)
        if isinstance(self.interval, bool) or not isinstance(self.interval, (int, float)) or self.interval <= 0:
            raise ConfigError(f"interval must be a positive number, got {self.interval!r}")

        self._lock = threading.Lock()
        self._renderer = Renderer(self.bar_width, stream)
        self._timer = Timer(clock)
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None
        self._animation_requested = False

        self._message = ""
        self._indicator_char = _indicator(self.config.get('indicatorChar', DEFAULT_INDICATOR_CHAR))
        self._quiet = bool(self.config.get('quiet', False))
        self._current = 0
        self._max: Optional[int] = None
        self.set_message(message)

        if max_val is None:
            self._mode = Mode.INDETERMINATE
        else:
            self._mode = Mode.DETERMINATE
            self._max = _positive_int('max_val', max_val)

    def __enter__(self) -> "ProgressBar":
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.finish(True)
        return False

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def current(self) -> int:
        return self._current

    @property
    def max_val(self) -> Optional[int]:
        return self._max

    @property
    def message(self) -> str:
        return self._message

    @property
    def indicator_char(self) -> str:
        return self._indicator_char

    @property
    def quiet(self) -> bool:
        return self._quiet

    @property
    def running(self) -> bool:
        """Whether time is being measured for the current run."""
        return self._timer.running

    @property
    def is_animating(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def set_message(self, message: str) -> None:
        """Replace the message; overlong text is truncated with an ellipsis."""
        if not isinstance(message, str):
            raise ConfigError(f"Message must be a string, got {type(message).__name__}")
        with self._lock:
            self._message = format_message(message, self.message_width)

    def set_max_val(self, max_val: int) -> None:
        max_val = _positive_int('max_val', max_val)
        if self._mode is not Mode.DETERMINATE:
            logging.debug("Ignoring maximum value outside determinate mode")
            return
        self._max = max_val
        self._current = min(self._current, max_val)

    def set_indicator_char(self, char: str) -> None:
        char = _indicator(char)
        with self._lock:
            self._indicator_char = char

    def set_quiet(self, quiet: bool) -> None:
        """Suppress or resume drawing. Time keeps being measured either way."""
        with self._lock:
            self._quiet = bool(quiet)
        # A quiet start spawns no thread until unmuted
        if not quiet and self._animation_requested:
            self._start_animation()

    def set_current_val(self, value: int) -> None:
        """Set progress and redraw the bar (determinate mode only)."""
        if self._mode is not Mode.DETERMINATE:
            logging.debug("Ignoring progress value outside determinate mode")
            return
        if self._max is None:
            raise ConfigError("Maximum value must be set before reporting progress")

        self._current = max(0, min(int(value), self._max))
        self._timer.start()
        sample = self._timer.sample(self._current, self._max)
        with self._lock:
            if self._quiet:
                return
            line = self._renderer.determinate_frame(
                self._message, self._current, self._max, self._indicator_char, sample.eta)
            self._renderer.write(line)

    def increment(self) -> None:
        self.set_current_val(self._current + 1)

    def sample(self) -> TimeSample:
        """Return elapsed time and ETA for the current run."""
        return self._timer.sample(self._current, self._max or 0)

    def set_mode(self, mode: Mode, finish_previous: bool = True) -> None:
        """Switch display mode.

        Args:
            mode: Mode to adopt
            finish_previous: Draw the terminal frame of the current mode first
        """
        if not isinstance(mode, Mode):
            raise ConfigError(f"Unknown progress mode: {mode!r}")
        if mode is self._mode:
            return

        self._animation_requested = False
        self._stop_animation()
        if finish_previous:
            self._render_finish(newline=True)
        self._timer.reset()
        self._current = 0
        self._mode = mode
        logging.debug(f"Progress bar switched to {mode.value} mode")

    def start(self) -> None:
        """Start the indeterminate animation. Ignored in determinate mode."""
        if self._mode is not Mode.INDETERMINATE:
            logging.debug("Ignoring start outside indeterminate mode")
            return
        self._animation_requested = True
        self._timer.start()
        if not self._quiet:
            self._start_animation()

    def stop(self) -> None:
        """Stop the animation without drawing a terminal frame."""
        self._animation_requested = False
        self._stop_animation()

    def finish(self, newline: bool = True) -> None:
        """Draw the terminal frame and end the current run.

        Message and settings are kept so the bar can be reused.

        Args:
            newline: Whether to end the line after the terminal frame
        """
        self._animation_requested = False
        self._stop_animation()
        if self._mode is Mode.DETERMINATE and self._max is not None:
            self._current = self._max
        self._render_finish(newline)
        self._timer.reset()

    def _render_finish(self, newline: bool) -> None:
        sample = self._timer.sample(self._current, self._max or 0)
        with self._lock:
            if self._quiet:
                return
            if self._mode is Mode.DETERMINATE:
                line = self._renderer.determinate_finish_frame(
                    self._message, self._indicator_char, sample.elapsed)
            else:
                line = self._renderer.indeterminate_finish_frame(
                    self._message, self._indicator_char, sample.elapsed)
            self._renderer.write(line, newline)

    def _start_animation(self) -> None:
        if self.is_animating:
            return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._animate, args=(self._stop_event,))
        self._thread.daemon = True
        self._thread.start()

    def _stop_animation(self) -> None:
        if self._stop_event is not None:
            self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None
        self._stop_event = None

    def _animate(self, stop_event: threading.Event) -> None:
        """Draw marquee frames until told to stop."""
        self._timer.start()
        marquee = Marquee(self.bar_width, self.marquee_width)
        while not stop_event.is_set():
            sample = self._timer.sample()
            with self._lock:
                # Keeps ticking while quiet; only drawing is skipped
                if not self._quiet:
                    track = marquee.next_track(self._indicator_char)
                    self._renderer.write(
                        self._renderer.indeterminate_frame(self._message, track, sample.elapsed))
            stop_event.wait(self.interval)
