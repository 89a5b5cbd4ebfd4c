"""Exceptions raised by the progress bar."""


class ConfigError(ValueError):
    """Raised when a progress bar is given an invalid configuration value."""
