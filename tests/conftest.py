"""
Pytest configuration and shared fixtures.

Provides test configuration instances and sample series for unit and
integration tests.
"""

import pytest
from typing import List

from tsreshape.core.config import Config, ResamplingConfig
from tsreshape.series.schema import Point


@pytest.fixture
def mock_config():
    """
    Fixture providing test configuration with explicit values.

    Used to override environment-based config in unit tests.
    Ensures tests run consistently regardless of .env settings.

    Returns:
        Config: Test instance with gap-filling 1-minute average buckets
    """
    return Config(
        log_level="WARNING",  # Reduce noise in test output
        log_to_file=False,
        resampling=ResamplingConfig(
            default_interval="1m",
            default_function="avg",
            fill_gaps=True,
        ),
    )


@pytest.fixture
def counter_series() -> List[Point]:
    """
    Fixture providing a monotonic counter sampled every 10 seconds,
    with a reset (process restart) after the fifth sample.

    Returns:
        List[Point]: 10 points starting at t=0
    """
    values = [100, 110, 130, 160, 200, 5, 15, 35, 65, 105]
    return [Point(value=float(v), timestamp=i * 10_000) for i, v in enumerate(values)]


@pytest.fixture
def gappy_series() -> List[Point]:
    """
    Fixture providing a 1 Hz gauge with missing samples.

    Returns:
        List[Point]: [1, None, 3, None, None, 6] at t=1000..6000
    """
    values = [1.0, None, 3.0, None, None, 6.0]
    return [Point(value=v, timestamp=(i + 1) * 1000) for i, v in enumerate(values)]


@pytest.fixture
def minute_series() -> List[Point]:
    """
    Fixture providing two hours of samples every 20 seconds.

    Values follow a repeating 0..9 pattern, so every minute holds three points.

    Returns:
        List[Point]: 360 points, sorted ascending
    """
    return [Point(value=float(i % 10), timestamp=i * 20_000) for i in range(360)]


def pytest_configure(config):
    """
    Pytest hook for custom configuration.

    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
