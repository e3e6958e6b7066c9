"""
Configuration constants for the twitchwire decoder

This module contains the protocol constants used by the decoder together with
the tunable defaults of the stream layer. Each tunable can be overridden by
setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean value from an environment variable.

    Accepts 'true', '1', 'yes' (case-insensitive) as true and 'false', '0',
    'no' as false. Anything else prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default value to return if parsing fails.

    Returns:
        The parsed boolean value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    print(f"Warning: Invalid boolean value for {name}='{value}', using default {default}")
    return default


# Stream layer tunables
TWITCHWIRE_MAX_LINE_LENGTH = _get_env_int(
    "TWITCHWIRE_MAX_LINE_LENGTH", 8192
)  # Longest line (in bytes, tags included) accepted by the line buffer
TWITCHWIRE_MIN_LINE_LENGTH_LIMIT = 512  # IRC's own line limit; settings may not go below it
TWITCHWIRE_LOG_RAW_LINES = _get_env_bool(
    "TWITCHWIRE_LOG_RAW_LINES", False
)  # Emit every raw line at DEBUG level while streaming
TWITCHWIRE_LOG_DECODE_ERRORS = _get_env_bool(
    "TWITCHWIRE_LOG_DECODE_ERRORS", True
)  # Report per-line decode failures through the structured error log

# Protocol constants
CTCP_MARKER = "\x01"
CTCP_ACTION = "ACTION"
SECONDS_PER_DAY = 86400  # followers-only values are expressed in days
DEFAULT_COLOR_RGB = (0xFF, 0xFF, 0xFF)  # white, used when a user never set a color
DEFAULT_EMOTE_SET = 0  # every account has the global emote set
MSG_RANGE_MAX = 0xFFFF  # emote/flag positions are unsigned 16-bit
SCORE_SEVERITY_MAX = 9
