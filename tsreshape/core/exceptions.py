"""
Custom exceptions for tsreshape.

These exceptions separate bad input data from bad configuration. Numeric edge
cases inside transforms never raise; they degrade to None/inf/nan instead.
"""


class TimeseriesError(Exception):
    """Base exception for time series processing failures."""
    pass


class ConfigurationError(TimeseriesError):
    """Raised when configuration is invalid (bad interval, unknown aggregation)."""
    pass


class DataValidationError(TimeseriesError):
    """Raised when raw series input fails validation."""
    pass
