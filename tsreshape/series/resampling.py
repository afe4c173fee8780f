"""
Resampling: downsampling and group-by over time frames.

Three strategies with different contracts:
- downsample: windows of fixed width tiled backward from an end time, each
  window stamped with its end (window is (start, end])
- group_by: buckets aligned to multiples of the interval, stamped with their
  start; tolerant of unsorted input, empty buckets are omitted
- group_by_perf: same buckets in a single pass over sorted input; empty
  buckets between points are emitted with a None value

The interval is parsed before any point is looked at, so a bad interval
raises IntervalParseError without producing partial output.
"""

import logging
from typing import Dict, List, Union

from tsreshape.core.exceptions import ConfigurationError
from tsreshape.core.intervals import get_point_time_frame, parse_interval
from tsreshape.core.types import AggregationFunction
from tsreshape.series.aggregators import Aggregator, get_aggregator
from tsreshape.series.schema import Frame, Point, TimeWindow

logger = logging.getLogger(__name__)

AggregatorSelector = Union[AggregationFunction, str, Aggregator, None]


def downsample(
    datapoints: List[Point],
    time_to: int,
    ms_interval: int,
    func: AggregatorSelector = AggregationFunction.AVG,
) -> List[Point]:
    """
    Downsample a sorted series into fixed windows ending at time_to.

    Args:
        datapoints: Series sorted ascending by timestamp
        time_to: End of the newest window, in seconds
        ms_interval: Window width in milliseconds
        func: Aggregation selector (avg by default)

    Returns:
        One point per window spanned by the input, ascending, each stamped
        with its window end

    Notes:
        - The series is scanned newest first; a point outside the current
          window closes it and is then checked against the next window
        - Empty windows between the newest point and time_to are skipped
        - Empty windows between two points are emitted with func([]): None
          for avg/min/max/median/sum and 0 for count. An empty window
          averages to None, not 0
        - Points newer than the current window (after time_to, or out of
          order) are skipped
    """
    if ms_interval <= 0:
        raise ConfigurationError(f"Window width must be positive, got {ms_interval}")

    aggregator = get_aggregator(func)
    window = TimeWindow.ending_at(time_to * 1000, ms_interval)

    downsampled: List[Point] = []
    frame: Frame = []
    started = False
    skipped = 0

    for i in range(len(datapoints) - 1, -1, -1):
        point = datapoints[i]

        if point.timestamp > window.end:
            skipped += 1
            continue

        if not started and not window.contains(point.timestamp):
            # Jump over leading empty windows
            steps = (window.end - point.timestamp) // ms_interval
            window = TimeWindow.ending_at(window.end - steps * ms_interval, ms_interval)

        while not window.contains(point.timestamp):
            downsampled.append(Point(value=aggregator(frame), timestamp=window.end))
            frame = []
            window.shift(ms_interval)

        frame.append(point.value)
        started = True

    if started:
        downsampled.append(Point(value=aggregator(frame), timestamp=window.end))

    if skipped:
        logger.debug("downsample skipped %d points newer than their window", skipped)

    downsampled.reverse()
    return downsampled


def group_by(
    datapoints: List[Point],
    interval: Union[str, int],
    func: AggregatorSelector,
) -> List[Point]:
    """
    Group points into interval-aligned buckets and aggregate each one.

    Args:
        datapoints: Series in any order
        interval: Bucket width ("1m", "5m", ...) or milliseconds
        func: Aggregation selector or callable

    Returns:
        One point per non-empty bucket, stamped with the bucket start,
        sorted ascending

    Raises:
        IntervalParseError: If interval is malformed
    """
    ms_interval = parse_interval(interval)
    aggregator = get_aggregator(func)

    frames: Dict[int, Frame] = {}
    for point in datapoints:
        frame_ts = get_point_time_frame(point.timestamp, ms_interval)
        frames.setdefault(frame_ts, []).append(point.value)

    return [
        Point(value=aggregator(frames[frame_ts]), timestamp=frame_ts)
        for frame_ts in sorted(frames)
    ]


def group_by_perf(
    datapoints: List[Point],
    interval: Union[str, int],
    func: AggregatorSelector,
) -> List[Point]:
    """
    Single-pass group-by for sorted series, filling empty buckets with None.

    Args:
        datapoints: Series sorted ascending by timestamp
        interval: Bucket width ("1m", "5m", ...) or milliseconds
        func: Aggregation selector or callable

    Returns:
        One point per bucket from the first to the last point's bucket,
        stamped with the bucket start. Buckets without points get value None.

    Notes:
        - A point whose bucket is earlier than the current one (unsorted
          input) is dropped

    Raises:
        IntervalParseError: If interval is malformed
    """
    ms_interval = parse_interval(interval)
    aggregator = get_aggregator(func)

    if not datapoints:
        return []

    grouped_series: List[Point] = []
    frame_values: Frame = []
    frame_ts = get_point_time_frame(datapoints[0].timestamp, ms_interval)
    dropped = 0

    for point in datapoints:
        point_frame_ts = get_point_time_frame(point.timestamp, ms_interval)
        if point_frame_ts == frame_ts:
            frame_values.append(point.value)
        elif point_frame_ts > frame_ts:
            grouped_series.append(Point(value=aggregator(frame_values), timestamp=frame_ts))

            # Move to the point's bucket, filling the empty ones with None
            frame_ts += ms_interval
            while frame_ts < point_frame_ts:
                grouped_series.append(Point(value=None, timestamp=frame_ts))
                frame_ts += ms_interval

            frame_values = [point.value]
        else:
            dropped += 1

    grouped_series.append(Point(value=aggregator(frame_values), timestamp=frame_ts))

    if dropped:
        logger.debug("group_by_perf dropped %d out-of-order points", dropped)

    return grouped_series
