"""
Interval parsing and time frame alignment.

Intervals are written as "<amount><unit>" (e.g. "30s", "5m", "1h") and are
converted to milliseconds. Parsing happens once, before any series is
touched, so a bad interval never produces partially bucketed output.
"""

import re
from typing import Union

from .exceptions import ConfigurationError

MS_PER_SECOND = 1000

# Month and year follow fixed-length calendar approximations
INTERVAL_UNITS_MS = {
    "ms": 1,
    "s": MS_PER_SECOND,
    "m": 60 * MS_PER_SECOND,
    "h": 60 * 60 * MS_PER_SECOND,
    "d": 24 * 60 * 60 * MS_PER_SECOND,
    "w": 7 * 24 * 60 * 60 * MS_PER_SECOND,
    "M": 30 * 24 * 60 * 60 * MS_PER_SECOND,
    "y": 365 * 24 * 60 * 60 * MS_PER_SECOND,
}

_INTERVAL_PATTERN = re.compile(r"^(\d+)(ms|s|m|h|d|w|M|y)$")


class IntervalParseError(ConfigurationError):
    """Raised when an interval string cannot be parsed."""
    pass


def parse_interval(interval: Union[str, int]) -> int:
    """
    Parse interval into milliseconds.

    Examples:
        "1m"  -> 60000
        "5s"  -> 5000
        "1h"  -> 3600000
        500   -> 500 (integers are already milliseconds)

    Args:
        interval: Interval string or positive integer milliseconds

    Returns:
        Interval width in milliseconds (always > 0)

    Raises:
        IntervalParseError: If the interval is malformed or not positive
    """
    if isinstance(interval, bool):
        raise IntervalParseError(f"Invalid interval: {interval!r}")

    if isinstance(interval, int):
        ms_interval = interval
    elif isinstance(interval, str):
        match = _INTERVAL_PATTERN.match(interval.strip())
        if match is None:
            raise IntervalParseError(f"Invalid interval: {interval!r}")
        amount, unit = match.groups()
        ms_interval = int(amount) * INTERVAL_UNITS_MS[unit]
    else:
        raise IntervalParseError(
            f"Interval must be a string or integer milliseconds, got {type(interval).__name__}"
        )

    if ms_interval <= 0:
        raise IntervalParseError(f"Interval must be positive: {interval!r}")

    return ms_interval


def get_point_time_frame(timestamp: int, ms_interval: int) -> int:
    """
    Align timestamp to the start of its time frame.

    |__*_|_*__|___*| -> |*___|*___|*___|

    Example with 1-minute frames (60000 ms):
    - 125000 -> 120000 (aligned down)
    - 120000 -> 120000 (already aligned)
    """
    return (timestamp // ms_interval) * ms_interval
