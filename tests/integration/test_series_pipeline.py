"""
Integration tests: raw pairs through normalization, resampling,
combination and transforms, back to pairs.
"""

import pytest

from tsreshape.series import (
    SeriesProcessor,
    downsample,
    group_by,
    group_by_perf,
    interpolate_series,
    rate,
    scale,
    sum_series,
    to_pairs,
    to_series,
)


pytestmark = pytest.mark.integration


def _counter(start_ms, step_ms, increments):
    value = 0
    pairs = []
    for i, inc in enumerate(increments):
        value += inc
        pairs.append([value, start_ms + i * step_ms])
    return pairs


def test_counter_to_bytes_per_minute():
    """Rate of a byte counter, grouped into minutes, scaled to bits."""
    raw = _counter(0, 10_000, [100] * 12)  # +100 bytes every 10s for 2 minutes
    series = to_series(raw)

    per_second = rate(series)
    per_minute = group_by_perf(per_second, "1m", "avg")
    bits = scale(per_minute, 8)

    assert to_pairs(bits) == [[80.0, 0], [80.0, 60_000]]


def test_counter_reset_does_not_go_negative():
    raw = [[500, 0], [600, 10_000], [50, 20_000], [150, 30_000]]

    result = to_pairs(rate(to_series(raw)))

    assert result == [[10.0, 10_000], [10.0, 20_000], [10.0, 30_000]]


def test_sum_of_hosts_with_missing_samples():
    host_a = to_series([[1, 1000], [None, 2000], [3, 3000]])
    host_b = to_series([[10, 1000], [30, 3000]])
    host_c = to_series([[100, 2000]])

    total = sum_series([host_a, host_b, host_c])

    assert to_pairs(total) == [[111.0, 1000], [122.0, 2000], [133.0, 3000]]


def test_group_by_variants_agree_where_both_have_buckets():
    raw = [[float(i), i * 15_000] for i in range(40) if not 10 <= i < 20]
    series = to_series(raw)

    full = {p.timestamp: p.value for p in group_by(series, "1m", "max")}
    perf = group_by_perf(series, "1m", "max")

    for point in perf:
        if point.timestamp in full:
            assert point.value == full[point.timestamp]
        else:
            assert point.value is None


def test_gap_filled_buckets_can_be_interpolated():
    series = to_series([[1, 0], [3, 120_000]])

    grouped = group_by_perf(series, "1m", "avg")
    interpolate_series(grouped)

    assert to_pairs(grouped) == [[1.0, 0], [2.0, 60_000], [3.0, 120_000]]


def test_downsample_then_rate(minute_series):
    maxima = downsample(minute_series, 7200, 600_000, "max")

    assert len(maxima) == 13
    assert len(rate(maxima)) == 12


def test_processor_roundtrip(mock_config):
    processor = SeriesProcessor(settings=mock_config)
    raw = {"target": "load", "datapoints": [[1, 0], [3, 30_000], [5, 150_000]]}

    payload = processor.process_payload(raw)

    assert payload.datapoints == [(2.0, 0), (None, 60_000), (5.0, 120_000)]
