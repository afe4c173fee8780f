"""
Gap interpolation for series.

Gaps (None values) are filled by linear interpolation between the nearest
real values on each side. At the edges of a series only one neighbour exists
and its value is carried over. A series with no real values is left as is.
"""

import logging
from typing import List, Optional

from tsreshape.series.schema import Point

logger = logging.getLogger(__name__)


def linear_interpolation(timestamp: int, left: Point, right: Point) -> float:
    """
    Value at timestamp on the line through left and right.

    If both neighbours share a timestamp (including left is right), their
    mean is returned instead of dividing by zero.
    """
    if left.timestamp == right.timestamp:
        return (left.value + right.value) / 2
    return left.value + (right.value - left.value) * (timestamp - left.timestamp) / (
        right.timestamp - left.timestamp
    )


def find_nearest_left(series: List[Point], index: int) -> Optional[Point]:
    """Nearest point with a value at or before index."""
    for i in range(index, -1, -1):
        if series[i].value is not None:
            return series[i]
    return None


def find_nearest_right(series: List[Point], index: int) -> Optional[Point]:
    """Nearest point with a value at or after index."""
    for i in range(index, len(series)):
        if series[i].value is not None:
            return series[i]
    return None


def interpolate_series(series: List[Point]) -> List[Point]:
    """
    Fill gaps in place and return the same list.

    Series must be sorted by timestamp. Neighbours are looked up once per run
    of consecutive gaps, before any gap in that run is filled, so each point
    is visited at most twice. Zero is a value, not a gap.
    """
    count = len(series)
    left: Optional[Point] = None
    right: Optional[Point] = None
    in_gap_run = False

    filled = 0
    for i, point in enumerate(series):
        if point.value is not None:
            in_gap_run = False
            continue
        if not in_gap_run:
            in_gap_run = True
            nearest_left = find_nearest_left(series, i)
            nearest_right = find_nearest_right(series, i)
            left = nearest_left or nearest_right
            right = nearest_right or nearest_left
        if left is None:
            # No real values anywhere
            break
        # Replace the entry: the gap Point may also belong to another list
        series[i] = Point(
            value=linear_interpolation(point.timestamp, left, right),
            timestamp=point.timestamp,
        )
        filled += 1

    if filled:
        logger.debug("Interpolated %d of %d points", filled, count)
    return series
