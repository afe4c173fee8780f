"""
Point-wise transforms: scale, delta, rate.

delta and rate drop the first point (it has no predecessor), so both return
len(datapoints) - 1 points.
"""

import logging
import math
from typing import List, Optional

from tsreshape.core.intervals import MS_PER_SECOND
from tsreshape.series.schema import Point

logger = logging.getLogger(__name__)


def sort_by_time(datapoints: List[Point]) -> List[Point]:
    """Stable ascending sort by timestamp, returning a new list."""
    return sorted(datapoints, key=lambda point: point.timestamp)


def _scaled(value: Optional[float], factor: float) -> Optional[float]:
    return None if value is None else value * factor


def scale(datapoints: List[Point], factor: float) -> List[Point]:
    """Multiply every value by factor. Returns a new series; gaps stay None."""
    return [
        Point(value=_scaled(point.value, factor), timestamp=point.timestamp)
        for point in datapoints
    ]


def scale_perf(datapoints: List[Point], factor: float) -> List[Point]:
    """
    In-place variant of scale.

    Replaces each list entry and returns the same list object. Point
    objects themselves are not mutated, but the caller's list is.
    """
    for i, point in enumerate(datapoints):
        datapoints[i] = Point(value=_scaled(point.value, factor), timestamp=point.timestamp)
    return datapoints


def delta(datapoints: List[Point]) -> List[Point]:
    """
    Difference between consecutive values, stamped at the later point.

    A gap on either side produces a gap.
    """
    new_series: List[Point] = []
    for prev, point in zip(datapoints, datapoints[1:]):
        if point.value is None or prev.value is None:
            delta_value = None
        else:
            delta_value = point.value - prev.value
        new_series.append(Point(value=delta_value, timestamp=point.timestamp))
    return new_series


def rate(datapoints: List[Point]) -> List[Point]:
    """
    Per-second rate of change. Resistant to counter reset.

    When the value decreases (counter reset) the previous rate is repeated
    instead of emitting a negative spike; before any rate has been computed
    that value is 0.0. Gaps are handled the same way.

    Two points with the same timestamp give inf for an increase and nan for
    an unchanged value.
    """
    new_series: List[Point] = []
    value_delta = 0.0
    resets = 0

    for prev, point in zip(datapoints, datapoints[1:]):
        if point.value is None or prev.value is None:
            new_series.append(Point(value=value_delta, timestamp=point.timestamp))
            continue

        # Counter reset: keep previous rate
        if point.value < prev.value:
            resets += 1
            new_series.append(Point(value=value_delta, timestamp=point.timestamp))
            continue

        time_delta = (point.timestamp - prev.timestamp) / MS_PER_SECOND
        diff = point.value - prev.value
        if time_delta == 0:
            value_delta = math.inf if diff > 0 else math.nan
        else:
            value_delta = diff / time_delta
        new_series.append(Point(value=value_delta, timestamp=point.timestamp))

    if resets:
        logger.debug("rate: %d counter resets", resets)

    return new_series
