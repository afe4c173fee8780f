"""
Multi-series combination.
"""

import logging
from typing import Dict, List, Optional, Sequence

from tsreshape.series.interpolation import interpolate_series
from tsreshape.series.schema import Point
from tsreshape.series.transforms import sort_by_time

logger = logging.getLogger(__name__)


def _align_to_timestamps(series: List[Point], timestamps: List[int]) -> Dict[int, Optional[float]]:
    """
    Interpolate series onto timestamps.

    Returns a timestamp -> value mapping covering every timestamp. Values are
    None only when the series has no real values at all.
    """
    present = {point.timestamp for point in series}
    gaps = [Point(value=None, timestamp=ts) for ts in timestamps if ts not in present]

    aligned = interpolate_series(sort_by_time(series + gaps))

    values: Dict[int, Optional[float]] = {}
    for point in aligned:
        # Duplicate timestamps: the first sample wins
        values.setdefault(point.timestamp, point.value)
    return values


def sum_series(timeseries: Sequence[List[Point]]) -> List[Point]:
    """
    Sum a set of series into one.

    Every series is first interpolated onto the union of all timestamps
    (using only its own values), then values are added per timestamp.

    Args:
        timeseries: Series to combine; they are not modified

    Returns:
        Summed series sorted ascending, one point per distinct timestamp

    Notes:
        - A single-point series contributes its value at every timestamp
        - A series with only gaps contributes nothing
    """
    timestamps = sorted({point.timestamp for series in timeseries for point in series})
    if not timestamps:
        return []

    aligned = [_align_to_timestamps(series, timestamps) for series in timeseries]

    summed: List[Point] = []
    for ts in timestamps:
        total = 0.0
        for values in aligned:
            value = values[ts]
            if value is not None:
                total += value
        summed.append(Point(value=total, timestamp=ts))

    logger.debug("Summed %d series over %d timestamps", len(timeseries), len(timestamps))
    return summed
