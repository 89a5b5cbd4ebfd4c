"""Constants used throughout the application."""

# Display widths
DEFAULT_BAR_WIDTH = 35
DEFAULT_MESSAGE_WIDTH = 35
DEFAULT_MARQUEE_WIDTH = 10

# Seconds between animation frames in indeterminate mode
DEFAULT_INTERVAL = 0.025

# Indicator character presets
SIGN_PIPE = "|"
SIGN_EQUALS = "="
SIGN_BACKSLASH = "\\"
SIGN_HASH = "#"
INDICATOR_PRESETS = [SIGN_PIPE, SIGN_EQUALS, SIGN_BACKSLASH, SIGN_HASH]
DEFAULT_INDICATOR_CHAR = SIGN_PIPE

# Marker appended to truncated messages
ELLIPSIS = "..."

# Shown while the ETA cannot be estimated
ETA_UNKNOWN = "--:--"

# Trailing blanks that erase the tail of a longer previous frame
FRAME_PADDING = 10

# Configuration file read from the working directory
CONFIG_FILE = "pbar.config.json"

# Output icons
DONE_ICON = "✔"
