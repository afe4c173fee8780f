"""
Shared enumerations.
"""

from enum import Enum


class AggregationFunction(str, Enum):
    """
    Aggregation selector for downsample and group-by call sites.

    AVG is the default everywhere a selector is optional.
    """
    AVG = "avg"
    MIN = "min"
    MAX = "max"
    SUM = "sum"
    COUNT = "count"
    MEDIAN = "median"
