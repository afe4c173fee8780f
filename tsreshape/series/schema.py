"""
Series data model.

A series is a list of Point objects ordered by timestamp. Timestamps are
integer milliseconds since epoch; a value of None marks a gap.

Design rationale:
- Point is a plain dataclass rather than a validated model: transforms run
  over large series on every render
- TimeSeriesPayload is the validated boundary for raw [[value, ts], ...] input
  coming from the data source
- Non-finite values are treated as gaps at the boundary
"""

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

POINT_VALUE = 0
POINT_TIMESTAMP = 1


@dataclass
class Point:
    """
    Single (value, timestamp) sample.

    Attributes:
        value: Sample value, or None for a gap
        timestamp: Milliseconds since epoch
    """

    value: Optional[float]
    timestamp: int

    @classmethod
    def from_pair(cls, pair: Sequence[Any]) -> "Point":
        return cls(value=pair[POINT_VALUE], timestamp=pair[POINT_TIMESTAMP])

    def as_pair(self) -> List[Any]:
        return [self.value, self.timestamp]


Series = List[Point]

# Values collected for one window or bucket
Frame = List[Optional[float]]


@dataclass
class TimeWindow:
    """
    Half-open time interval (start, end] in milliseconds.

    Used by downsampling, where windows tile backward from an end time.
    """

    start: int
    end: int

    @classmethod
    def ending_at(cls, end: int, width: int) -> "TimeWindow":
        return cls(start=end - width, end=end)

    def contains(self, timestamp: int) -> bool:
        return self.start < timestamp <= self.end

    def shift(self, width: int) -> None:
        """Slide the window back by width."""
        self.end = self.start
        self.start -= width


class TimeSeriesPayload(BaseModel):
    """
    Raw series as exchanged with data sources and consumers.

    Attributes:
        target: Series name (item/metric label)
        datapoints: [[value, timestamp], ...] pairs

    Notes:
        - Timestamps must be integers (float timestamps with no fractional
          part are accepted)
        - NaN and infinite values are stored as None
    """

    target: str = Field(default="", description="Series name")

    datapoints: List[Tuple[Optional[float], int]] = Field(
        default_factory=list,
        description="[value, timestamp] pairs, timestamp in ms"
    )

    @field_validator("datapoints")
    @classmethod
    def non_finite_to_gap(
        cls, datapoints: List[Tuple[Optional[float], int]]
    ) -> List[Tuple[Optional[float], int]]:
        return [
            (value if value is None or math.isfinite(value) else None, timestamp)
            for value, timestamp in datapoints
        ]

    @property
    def point_count(self) -> int:
        return len(self.datapoints)
