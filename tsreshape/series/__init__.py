"""
Series module: normalization, aggregation, resampling, interpolation, and
point-wise transforms over (value, timestamp) series.

Typical flow:

    Raw [[value, ts], ...] pairs
        ↓
    Normalization (tsreshape/series/normalizers.py) → List[Point]
        ↓
    Resampling (resampling.py) or combination (combinators.py),
    using aggregators.py and interpolation.py
        ↓
    Point-wise transforms (transforms.py)
        ↓
    Back to pairs for the consumer
"""

from tsreshape.series.aggregators import (
    AGGREGATORS,
    average,
    count_values,
    get_aggregator,
    maximum,
    median,
    minimum,
    sum_values,
)
from tsreshape.series.combinators import sum_series
from tsreshape.series.interpolation import (
    find_nearest_left,
    find_nearest_right,
    interpolate_series,
    linear_interpolation,
)
from tsreshape.series.normalizers import (
    normalize_payload,
    payload_to_series,
    series_to_payload,
    to_pairs,
    to_series,
)
from tsreshape.series.processor import SeriesProcessor
from tsreshape.series.resampling import downsample, group_by, group_by_perf
from tsreshape.series.schema import (
    Frame,
    Point,
    Series,
    TimeSeriesPayload,
    TimeWindow,
)
from tsreshape.series.transforms import delta, rate, scale, scale_perf, sort_by_time

__all__ = [
    # Schema
    "Point",
    "Series",
    "Frame",
    "TimeWindow",
    "TimeSeriesPayload",

    # Normalization
    "normalize_payload",
    "payload_to_series",
    "series_to_payload",
    "to_series",
    "to_pairs",

    # Aggregators
    "AGGREGATORS",
    "get_aggregator",
    "count_values",
    "sum_values",
    "average",
    "minimum",
    "maximum",
    "median",

    # Interpolation
    "linear_interpolation",
    "find_nearest_left",
    "find_nearest_right",
    "interpolate_series",

    # Resampling
    "downsample",
    "group_by",
    "group_by_perf",

    # Combination
    "sum_series",

    # Transforms
    "sort_by_time",
    "scale",
    "scale_perf",
    "delta",
    "rate",

    # Facade
    "SeriesProcessor",
]
