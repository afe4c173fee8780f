"""
Config-driven entry point for the series transforms.

Callers that do not carry their own interval or aggregation choice use
SeriesProcessor, which fills them in from configuration and selects the
group-by strategy (gap-filling or not).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from tsreshape.core.config import Config, config as default_config
from tsreshape.core.intervals import parse_interval
from tsreshape.series.aggregators import get_aggregator
from tsreshape.series.combinators import sum_series
from tsreshape.series.normalizers import normalize_payload, payload_to_series, series_to_payload
from tsreshape.series.resampling import AggregatorSelector, downsample, group_by, group_by_perf
from tsreshape.series.schema import Point, TimeSeriesPayload
from tsreshape.series.transforms import delta, rate, scale

logger = logging.getLogger(__name__)


@dataclass
class SeriesProcessor:
    """
    Applies transforms with configured defaults.

    Notes:
    - interval and func fall back to config.resampling defaults.
    - group() uses group_by_perf when fill_gaps is enabled, else group_by.
    - Input series are never modified.
    """

    settings: Config = field(default_factory=lambda: default_config)

    def _resolve(
        self,
        interval: Optional[Union[str, int]],
        func: AggregatorSelector,
    ) -> Tuple[Union[str, int], AggregatorSelector]:
        resampling = self.settings.resampling
        if interval is None:
            interval = resampling.default_interval
        if func is None:
            func = resampling.default_function
        return interval, func

    def group(
        self,
        datapoints: List[Point],
        interval: Optional[Union[str, int]] = None,
        func: AggregatorSelector = None,
    ) -> List[Point]:
        interval, func = self._resolve(interval, func)
        if self.settings.resampling.fill_gaps:
            return group_by_perf(datapoints, interval, func)
        return group_by(datapoints, interval, func)

    def downsample(
        self,
        datapoints: List[Point],
        time_to: int,
        interval: Optional[Union[str, int]] = None,
        func: AggregatorSelector = None,
    ) -> List[Point]:
        interval, func = self._resolve(interval, func)
        return downsample(datapoints, time_to, parse_interval(interval), func)

    def sum(self, timeseries: Sequence[List[Point]]) -> List[Point]:
        return sum_series(timeseries)

    def scale(self, datapoints: List[Point], factor: float) -> List[Point]:
        return scale(datapoints, factor)

    def delta(self, datapoints: List[Point]) -> List[Point]:
        return delta(datapoints)

    def rate(self, datapoints: List[Point]) -> List[Point]:
        return rate(datapoints)

    def process_payload(
        self,
        raw: Dict[str, Any],
        interval: Optional[Union[str, int]] = None,
        func: AggregatorSelector = None,
    ) -> TimeSeriesPayload:
        """
        Validate a raw {"target", "datapoints"} payload and group it.

        Raises:
            DataValidationError: If the payload is malformed
            ConfigurationError: If interval or func is invalid
        """
        interval, func = self._resolve(interval, func)
        # Fail on configuration before touching data
        parse_interval(interval)
        get_aggregator(func)

        payload = normalize_payload(raw)
        grouped = self.group(payload_to_series(payload), interval, func)
        logger.debug(
            "Grouped %r: %d -> %d points (interval=%s)",
            payload.target,
            payload.point_count,
            len(grouped),
            interval,
        )
        return series_to_payload(grouped, target=payload.target)
