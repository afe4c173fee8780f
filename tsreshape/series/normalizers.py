"""
Series normalization: convert raw datapoint pairs into Point lists and back.

Data sources hand over series as [[value, timestamp], ...] pairs (optionally
wrapped as {"target": ..., "datapoints": [...]}). Normalization validates
that shape once so the transforms can assume well-typed points.
"""

import logging
from typing import Any, Dict, Iterable, List, Sequence

from pydantic import ValidationError

from tsreshape.core.exceptions import DataValidationError
from tsreshape.series.schema import Point, TimeSeriesPayload

logger = logging.getLogger(__name__)


def normalize_payload(raw: Dict[str, Any]) -> TimeSeriesPayload:
    """
    Validate a raw {"target", "datapoints"} mapping.

    Args:
        raw: Mapping as returned by the data source

    Returns:
        Validated TimeSeriesPayload

    Raises:
        DataValidationError: If values or timestamps have the wrong type
    """
    try:
        return TimeSeriesPayload.model_validate(raw)
    except ValidationError as exc:
        raise DataValidationError(
            f"Invalid series payload ({exc.error_count()} errors): {exc}"
        ) from exc


def to_series(pairs: Iterable[Sequence[Any]]) -> List[Point]:
    """
    Convert [[value, timestamp], ...] pairs into a list of Points.

    Args:
        pairs: Raw datapoint pairs

    Returns:
        List of Point objects in input order

    Raises:
        DataValidationError: If any pair is malformed
    """
    payload = normalize_payload({"datapoints": list(pairs)})
    return payload_to_series(payload)


def payload_to_series(payload: TimeSeriesPayload) -> List[Point]:
    """Points of a validated payload, in input order."""
    series = [Point(value=value, timestamp=ts) for value, ts in payload.datapoints]
    gaps = sum(1 for point in series if point.value is None)
    if gaps:
        logger.debug("Series %r: %d of %d points are gaps", payload.target, gaps, len(series))
    return series


def to_pairs(series: Iterable[Point]) -> List[List[Any]]:
    """Convert Points back to [[value, timestamp], ...] pairs."""
    return [point.as_pair() for point in series]


def series_to_payload(series: Iterable[Point], target: str = "") -> TimeSeriesPayload:
    """Wrap Points in a payload for consumers."""
    return TimeSeriesPayload(
        target=target,
        datapoints=[(point.value, point.timestamp) for point in series],
    )
