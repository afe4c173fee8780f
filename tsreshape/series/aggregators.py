"""
Frame aggregators.

Each aggregator reduces the values of one window/bucket to a single value.
Aggregators are pure and never raise: an empty frame yields None (COUNT
yields 0).

Null handling differs per aggregator and is part of the contract:
- count_values counts gaps too (it is the frame length)
- sum_values is poisoned by any gap: one None makes the whole sum None
- average, minimum, maximum and median ignore gaps
"""

from typing import Callable, Dict, List, Optional, Union

from tsreshape.core.exceptions import ConfigurationError
from tsreshape.core.types import AggregationFunction
from tsreshape.series.schema import Frame

Aggregator = Callable[[Frame], Optional[float]]


def non_null_values(values: Frame) -> List[float]:
    return [value for value in values if value is not None]


def count_values(values: Frame) -> int:
    """Number of values in the frame, gaps included."""
    return len(values)


def sum_values(values: Frame) -> Optional[float]:
    """
    Arithmetic sum of the frame.

    Returns None for an empty frame, and None if any value is a gap.
    Callers that want gaps skipped should filter first (average does).
    """
    if not values:
        return None
    total = 0.0
    for value in values:
        if value is None:
            return None
        total += value
    return total


def average(values: Frame) -> Optional[float]:
    """Mean of the non-null values, None if there are none."""
    values_non_null = non_null_values(values)
    if not values_non_null:
        return None
    return sum_values(values_non_null) / len(values_non_null)


def minimum(values: Frame) -> Optional[float]:
    values_non_null = non_null_values(values)
    return min(values_non_null) if values_non_null else None


def maximum(values: Frame) -> Optional[float]:
    values_non_null = non_null_values(values)
    return max(values_non_null) if values_non_null else None


def median(values: Frame) -> Optional[float]:
    """
    Upper median: element at index len // 2 of the sorted values.

    For even-length frames this is the higher of the two middle values,
    not their mean.
    """
    ordered = sorted(non_null_values(values))
    if not ordered:
        return None
    return ordered[len(ordered) // 2]


AGGREGATORS: Dict[AggregationFunction, Aggregator] = {
    AggregationFunction.AVG: average,
    AggregationFunction.MIN: minimum,
    AggregationFunction.MAX: maximum,
    AggregationFunction.SUM: sum_values,
    AggregationFunction.COUNT: count_values,
    AggregationFunction.MEDIAN: median,
}

_ALIASES = {
    "average": AggregationFunction.AVG,
}


def get_aggregator(
    func: Union[AggregationFunction, str, Aggregator, None] = None
) -> Aggregator:
    """
    Resolve an aggregation selector to an aggregator function.

    Args:
        func: AggregationFunction, its name ("avg", "max", ... case-insensitive),
            a callable aggregator (returned unchanged), or None for average

    Returns:
        Aggregator callable

    Raises:
        ConfigurationError: If the name is not a known aggregation
    """
    if func is None:
        return AGGREGATORS[AggregationFunction.AVG]
    if isinstance(func, AggregationFunction):
        return AGGREGATORS[func]
    if isinstance(func, str):
        name = func.strip().lower()
        selector = _ALIASES.get(name)
        if selector is None:
            try:
                selector = AggregationFunction(name)
            except ValueError as exc:
                known = ", ".join(f.value for f in AggregationFunction)
                raise ConfigurationError(
                    f"Unknown aggregation function {func!r} (expected one of: {known})"
                ) from exc
        return AGGREGATORS[selector]
    if callable(func):
        return func
    raise ConfigurationError(f"Invalid aggregation function: {func!r}")
