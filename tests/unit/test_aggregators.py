"""
Unit tests for frame aggregators.
"""

import pytest

from tsreshape.core.exceptions import ConfigurationError
from tsreshape.core.types import AggregationFunction
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


class TestCount:
    def test_counts_gaps(self):
        assert count_values([1.0, None, 3.0]) == 3

    def test_empty(self):
        assert count_values([]) == 0


class TestSum:
    """SUM: empty is None, any gap poisons the sum."""

    def test_numbers(self):
        assert sum_values([1.0, 2.0, 3.5]) == 6.5

    def test_empty_is_none(self):
        assert sum_values([]) is None

    def test_gap_poisons_sum(self):
        assert sum_values([1.0, None, 3.0]) is None

    def test_trailing_gap_poisons_sum(self):
        assert sum_values([1.0, 2.0, None]) is None

    def test_all_gaps(self):
        assert sum_values([None, None]) is None

    def test_zero_sum_is_not_none(self):
        assert sum_values([0.0, 0.0]) == 0.0


class TestAverage:
    def test_ignores_gaps(self):
        assert average([1.0, None, 3.0]) == 2.0

    def test_all_gaps_is_none(self):
        assert average([None, None]) is None

    def test_empty_is_none(self):
        assert average([]) is None

    def test_mean(self):
        assert average([1.0, 2.0, 3.0, 4.0]) == 2.5


class TestMinMax:
    def test_min(self):
        assert minimum([3.0, 1.0, 2.0]) == 1.0

    def test_max(self):
        assert maximum([3.0, 1.0, 2.0]) == 3.0

    def test_empty_is_none(self):
        assert minimum([]) is None
        assert maximum([]) is None

    def test_gaps_ignored(self):
        assert minimum([None, 5.0, 2.0]) == 2.0
        assert maximum([None, 5.0, 2.0]) == 5.0

    def test_negative_values(self):
        assert minimum([-1.0, -5.0]) == -5.0
        assert maximum([-1.0, -5.0]) == -1.0


class TestMedian:
    def test_odd_length(self):
        assert median([1.0, 2.0, 3.0]) == 2.0

    def test_even_length_is_upper_median(self):
        assert median([1.0, 2.0, 3.0, 4.0]) == 3.0

    def test_unsorted_input(self):
        assert median([9.0, 1.0, 5.0]) == 5.0

    def test_single(self):
        assert median([7.0]) == 7.0

    def test_empty_is_none(self):
        assert median([]) is None


class TestGetAggregator:
    """Test resolution of aggregation selectors."""

    def test_default_is_average(self):
        assert get_aggregator() is average
        assert get_aggregator(None) is average

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("avg", average),
            ("min", minimum),
            ("max", maximum),
            ("sum", sum_values),
            ("count", count_values),
            ("median", median),
            ("MAX", maximum),
            ("average", average),
        ],
    )
    def test_by_name(self, name, expected):
        assert get_aggregator(name) is expected

    def test_by_enum(self):
        assert get_aggregator(AggregationFunction.MEDIAN) is median

    def test_callable_passes_through(self):
        def last(values):
            return values[-1] if values else None

        assert get_aggregator(last) is last

    def test_mean_is_not_an_alias(self):
        with pytest.raises(ConfigurationError):
            get_aggregator("mean")

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigurationError):
            get_aggregator("p95")

    def test_non_callable_raises(self):
        with pytest.raises(ConfigurationError):
            get_aggregator(42)

    def test_registry_covers_every_selector(self):
        assert set(AGGREGATORS) == set(AggregationFunction)


@pytest.mark.parametrize("aggregator", list(AGGREGATORS.values()))
def test_aggregators_never_raise_on_empty(aggregator):
    aggregator([])
