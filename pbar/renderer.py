"""Formatting and in-place redraw of progress bar frames."""
import logging
import sys
from typing import Optional, TextIO

from .constants import (
    DEFAULT_BAR_WIDTH,
    DEFAULT_MARQUEE_WIDTH,
    ELLIPSIS,
    FRAME_PADDING
)
from .timer import format_clock


def format_message(text: str, width: int) -> str:
    """Pad or truncate a message so the bar starts at a fixed column.

    Args:
        text: Message to show in front of the bar
        width: Number of columns reserved for the message

    Returns:
        The message left-justified to exactly ``width`` characters
    """
    if len(text) <= width:
        return text.ljust(width)
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[:width - len(ELLIPSIS)] + ELLIPSIS


class Marquee:
    """Block of indicator characters sweeping across the track.

    The block moves one cell per tick. Near the right edge it shrinks so that
    it never leaves the track, and once the position reaches the end of the
    track the sweep restarts from the left with the full block width.
    """

    def __init__(self, bar_width: int = DEFAULT_BAR_WIDTH, width: int = DEFAULT_MARQUEE_WIDTH):
        self.bar_width = bar_width
        self.width = width
        self.position = 0
        self.size = width

    def next_track(self, char: str) -> str:
        """Return the track for the current tick and advance."""
        if self.position >= self.bar_width:
            self.position = 0
            self.size = self.width
        self.size = min(self.width, self.bar_width - self.position)

        track = (' ' * self.position
                 + char * self.size
                 + ' ' * (self.bar_width - self.position - self.size))
        self.position += 1
        return track


class Renderer:
    """Builds frame lines and redraws them on a text stream."""

    def __init__(self, bar_width: int = DEFAULT_BAR_WIDTH, stream: Optional[TextIO] = None):
        self.bar_width = bar_width
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stderr is looked up at write time
        return self._stream if self._stream is not None else sys.stderr

    def _line(self, message: str, track: str, annotation: str) -> str:
        return f"{message}: |{track}| {annotation}" + ' ' * FRAME_PADDING

    def determinate_frame(self, message: str, current: int, max_val: int,
                          char: str, eta: Optional[int] = None) -> str:
        filled = self.bar_width * current // max_val
        percent = 100 * current // max_val
        track = char * filled + ' ' * (self.bar_width - filled)
        return self._line(message, track, f"{percent}% [ETA: {format_clock(eta)}]")

    def determinate_finish_frame(self, message: str, char: str, total: float) -> str:
        return self._line(message, char * self.bar_width, f"100% [Total: {format_clock(total)}]")

    def indeterminate_frame(self, message: str, track: str, elapsed: float) -> str:
        return self._line(message, track, f"[{format_clock(elapsed)}]")

    def indeterminate_finish_frame(self, message: str, char: str, elapsed: float) -> str:
        return self._line(message, char * self.bar_width, f"[{format_clock(elapsed)}]")

    def write(self, line: str, newline: bool = False) -> None:
        """Redraw the current console line.

        Failures are logged; progress output never interrupts the work being
        tracked.

        Args:
            line: Frame to draw
            newline: Whether to end the line after drawing it
        """
        stream = self.stream
        try:
            stream.write('\r' + line + ('\n' if newline else ''))
            stream.flush()
        except (OSError, ValueError) as e:
            logging.warning(f"Failed to write progress bar: {e}")
