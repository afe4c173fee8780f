"""
Core module: Configuration, logging, exceptions, and interval handling.
"""

from .config import Config, ResamplingConfig, config
from .exceptions import (
    ConfigurationError,
    DataValidationError,
    TimeseriesError,
)
from .intervals import IntervalParseError, get_point_time_frame, parse_interval
from .logging_config import setup_logging
from .types import AggregationFunction

__all__ = [
    "Config",
    "ResamplingConfig",
    "config",
    "TimeseriesError",
    "ConfigurationError",
    "DataValidationError",
    "IntervalParseError",
    "parse_interval",
    "get_point_time_frame",
    "setup_logging",
    "AggregationFunction",
]
