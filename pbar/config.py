"""Module for handling configuration and logging setup."""
import json
import logging
from typing import Dict, Any
from .constants import (
    CONFIG_FILE,
    DEFAULT_BAR_WIDTH,
    DEFAULT_INDICATOR_CHAR,
    DEFAULT_INTERVAL,
    DEFAULT_MARQUEE_WIDTH,
    DEFAULT_MESSAGE_WIDTH
)

def configure_logging(debug: bool) -> None:
    """Configure logging based on debug flag.

    Args:
        debug: Whether to enable debug logging
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.INFO, format='%(message)s')

def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0

def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0

def _is_char(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1

# Validator for every recognised key
VALIDATORS = {
    'barWidth': _is_positive_int,
    'messageWidth': _is_positive_int,
    'marqueeWidth': _is_positive_int,
    'interval': _is_positive_number,
    'indicatorChar': _is_char,
    'quiet': lambda value: isinstance(value, bool)
}

def default_config() -> Dict[str, Any]:
    """Return the built-in configuration."""
    return {
        "barWidth": DEFAULT_BAR_WIDTH,
        "messageWidth": DEFAULT_MESSAGE_WIDTH,
        "marqueeWidth": DEFAULT_MARQUEE_WIDTH,
        "interval": DEFAULT_INTERVAL,
        "indicatorChar": DEFAULT_INDICATOR_CHAR,
        "quiet": False
    }

def read_config(path: str = CONFIG_FILE) -> Dict[str, Any]:
    """Read and validate configuration from file.

    Args:
        path: Location of the JSON configuration file

    Returns:
        Configuration dictionary with defaults applied
    """
    logging.debug("Reading configuration")
    config = default_config()

    try:
        with open(path, 'r') as f:
            try:
                user_config = json.load(f)
            except json.JSONDecodeError:
                logging.warning("Invalid JSON in config file. Using default configuration.")
                return config
    except FileNotFoundError:
        logging.debug("Configuration file not found. Using default configuration.")
        return config

    if not isinstance(user_config, dict):
        logging.warning("Config file must contain a JSON object. Using default configuration.")
        return config

    for key, value in user_config.items():
        validator = VALIDATORS.get(key)
        if validator is None:
            logging.warning(f"Unknown '{key}' in config. Ignoring.")
        elif validator(value):
            config[key] = value
        else:
            logging.warning(f"Invalid '{key}' in config. Using default.")

    return config
