from __future__ import annotations

import random

import pytest

from statkit.analyze.percentiles import (
    deciles,
    interquartile_range,
    percentile,
    quantiles,
    quartiles,
)
from statkit.result import ErrorKind

SAMPLE = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]


def test_percentile_interpolates_on_n_plus_one_rank() -> None:
    assert percentile(SAMPLE, 25).value == 2.75
    assert percentile(SAMPLE, 50).value == 5.5
    assert percentile(SAMPLE, 75).value == 8.25


def test_percentile_zero_returns_zero_not_minimum() -> None:
    r = percentile([5.0, 6.0, 7.0], 0)
    assert r.ok
    assert r.value == 0.0


def test_percentile_hundred_is_maximum() -> None:
    rng = random.Random(11)
    for _ in range(20):
        xs = [rng.uniform(-50.0, 50.0) for _ in range(rng.randint(1, 30))]
        assert percentile(xs, 100).value == max(xs)


def test_percentile_clamps_below_first_rank() -> None:
    # rank = 0.05 * 11 = 0.55 < 1
    assert percentile(SAMPLE, 5).value == 1.0


def test_percentile_rank_equal_to_n_is_maximum() -> None:
    # rank = 0.75 * 4 = 3 == n
    assert percentile([3.0, 1.0, 2.0], 75).value == 3.0


def test_percentile_single_value() -> None:
    assert percentile([42.0], 50).value == 42.0


@pytest.mark.parametrize("p", [-0.5, 100.01, 250])
def test_percentile_out_of_range(p: float) -> None:
    r = percentile(SAMPLE, p)
    assert not r.ok
    assert r.kind is ErrorKind.INVALID_PERCENTILE
    assert r.message.startswith("InvalidPercentile")
    assert r.value == 0.0


def test_percentile_empty_sample() -> None:
    r = percentile([], 50)
    assert not r.ok
    assert r.kind is ErrorKind.EMPTY_SAMPLE


def test_percentile_does_not_mutate_input() -> None:
    xs = [9.0, 3.0, 5.0]
    percentile(xs, 40)
    assert xs == [9.0, 3.0, 5.0]


def test_quantiles_maps_ranks_in_order() -> None:
    r = quantiles(SAMPLE, [75, 25, 50])
    assert r.ok
    assert r.value == [8.25, 2.75, 5.5]


def test_quantiles_requires_sample_and_ranks() -> None:
    for xs, ranks in (([], [50]), (SAMPLE, [])):
        r = quantiles(xs, ranks)
        assert not r.ok
        assert r.kind is ErrorKind.EMPTY_SAMPLE
        assert r.value == []


def test_quantiles_propagates_first_failure_unchanged() -> None:
    r = quantiles(SAMPLE, [25, 150, -3])
    assert not r.ok
    assert r.kind is ErrorKind.INVALID_PERCENTILE
    assert r.message == percentile(SAMPLE, 150).message
    assert r.value == []


def test_quartiles_include_whisker_ranks() -> None:
    r = quartiles(SAMPLE)
    assert r.ok
    assert r.value == [1.0, 2.75, 5.5, 8.25, 10.0]


def test_quartiles_custom_ranks() -> None:
    assert quartiles(SAMPLE, ranks=(25, 75)).value == [2.75, 8.25]


def test_deciles() -> None:
    r = deciles(SAMPLE)
    assert r.ok
    assert len(r.value) == 9
    assert r.value == pytest.approx([1.1 * k for k in range(1, 10)])


def test_deciles_empty_sample() -> None:
    assert deciles([]).kind is ErrorKind.EMPTY_SAMPLE


def test_interquartile_range() -> None:
    r = interquartile_range(SAMPLE)
    assert r.ok
    assert r.value == 5.5


def test_interquartile_range_empty_propagates_percentile_message() -> None:
    r = interquartile_range([])
    assert not r.ok
    assert r.kind is ErrorKind.EMPTY_SAMPLE
    assert r.message == percentile([], 75).message
