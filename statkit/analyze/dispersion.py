from __future__ import annotations

import math
from typing import Any, Sequence, Tuple

from statkit.analyze.central import mean, median
from statkit.result import ErrorKind, Result, failure, success


def _empty(op: str, value: Any = 0.0) -> Result[Any]:
    return failure(ErrorKind.EMPTY_SAMPLE, f"{op} of an empty sample", value=value, op=op)


def mean_absolute_deviation(xs: Sequence[float]) -> Result[float]:
    if not xs:
        return _empty("mean_absolute_deviation")
    m = mean(xs)
    return success(mean([abs(x - m) for x in xs]))


def variance(xs: Sequence[float]) -> Result[float]:
    """Population variance (denominator n)."""
    if not xs:
        return _empty("variance")
    m = mean(xs)
    return success(sum((x - m) ** 2 for x in xs) / len(xs))


def standard_deviation(xs: Sequence[float]) -> Result[float]:
    var = variance(xs)
    if not var.ok:
        return var
    return success(math.sqrt(var.value))


def median_absolute_deviation(xs: Sequence[float]) -> Result[float]:
    if not xs:
        return _empty("median_absolute_deviation")
    med = median(xs)
    return success(median([abs(x - med) for x in xs]))


def min_max_values(xs: Sequence[float]) -> Result[Tuple[float, float]]:
    if not xs:
        return _empty("min_max_values", value=(0.0, 0.0))
    return success((float(min(xs)), float(max(xs))))


def value_range(xs: Sequence[float]) -> float:
    """max - min; 0.0 for an empty sample."""
    mm = min_max_values(xs)
    if not mm.ok:
        return 0.0
    lo, hi = mm.value
    return hi - lo
