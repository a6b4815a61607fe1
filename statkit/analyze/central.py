from __future__ import annotations

import math
from typing import List, Sequence

from statkit.result import ErrorKind, Result, failure, success


def _validate_weights(xs: Sequence[float], weights: Sequence[float], op: str) -> Result[float] | None:
    if len(xs) != len(weights):
        return failure(
            ErrorKind.LENGTH_MISMATCH,
            f"sample has {len(xs)} values but weights has {len(weights)}",
            op=op,
        )
    for i, w in enumerate(weights):
        if w < 0:
            return failure(
                ErrorKind.NEGATIVE_WEIGHT,
                f"weight at index {i} is negative ({w})",
                op=op,
            )
    return None


def _middle(ys: List[float]) -> float:
    """Median of an already sorted, non-empty list."""
    n = len(ys)
    mid = n // 2
    if n % 2 == 1:
        return float(ys[mid])
    return (ys[mid - 1] + ys[mid]) / 2.0


def mean(xs: Sequence[float]) -> float:
    return sum(xs) / len(xs) if xs else 0.0


def trimmed_mean(xs: Sequence[float], trim_fraction: float) -> Result[float]:
    """
    Mean of the positional slice ``[k, n-k)`` with ``k = floor(n * trim_fraction / 2)``.

    The sample is NOT sorted first: the trim drops the first and last k
    elements as given.  Sort beforehand for an order-statistic trimmed mean.
    """
    n = len(xs)
    if trim_fraction < 0:
        return failure(ErrorKind.INVALID_TRIM, f"trim fraction must be >= 0, got {trim_fraction}", op="trimmed_mean")
    k = math.floor(n * trim_fraction / 2)
    if 2 * k >= n - 1:
        return failure(
            ErrorKind.INVALID_TRIM,
            f"trim fraction {trim_fraction} removes too many of {n} values",
            op="trimmed_mean",
        )
    return success(mean(xs[k:n - k]))


def weighted_mean(xs: Sequence[float], weights: Sequence[float]) -> Result[float]:
    """
    sum(x_i * w_i) / n.

    The denominator is the element count, not the total weight.
    """
    bad = _validate_weights(xs, weights, "weighted_mean")
    if bad is not None:
        return bad
    if not xs:
        return success(0.0)
    return success(sum(x * w for x, w in zip(xs, weights)) / len(xs))


def median(xs: Sequence[float]) -> float:
    if not xs:
        return 0.0
    return _middle(sorted(xs))


def trimmed_median(xs: Sequence[float], trim_fraction: float) -> Result[float]:
    if not 0 < trim_fraction <= 0.5:
        return failure(
            ErrorKind.INVALID_TRIM,
            f"trim fraction must be in (0, 0.5], got {trim_fraction}",
            op="trimmed_median",
        )
    if not xs:
        return success(0.0)

    ys = sorted(xs)
    n = len(ys)
    trim_count = math.floor(n * trim_fraction / 2)
    if 2 * trim_count >= n:
        return failure(
            ErrorKind.INVALID_TRIM,
            f"trim fraction {trim_fraction} removes all {n} values",
            op="trimmed_median",
        )
    return success(_middle(ys[trim_count:n - trim_count]))


def weighted_median(xs: Sequence[float], weights: Sequence[float]) -> Result[float]:
    """
    First value (ascending) whose cumulative weight reaches half the total.

    If the walk never reaches the threshold (zero total weight, or float
    drift) the largest value is returned.
    """
    bad = _validate_weights(xs, weights, "weighted_median")
    if bad is not None:
        return bad
    if not xs:
        return success(0.0)

    pairs = sorted(zip(xs, weights), key=lambda p: p[0])
    total = sum(w for _, w in pairs)
    half = total / 2.0

    if total > 0:
        cum = 0.0
        for x, w in pairs:
            cum += w
            if cum >= half:
                return success(float(x))

    return success(float(pairs[-1][0]))
