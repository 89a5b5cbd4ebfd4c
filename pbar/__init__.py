"""Text-based progress bar for console streams."""
from .errors import ConfigError
from .progress import Mode, ProgressBar
from .timer import Timer, TimeSample, format_clock

__all__ = ['ConfigError', 'Mode', 'ProgressBar', 'Timer', 'TimeSample', 'format_clock']
