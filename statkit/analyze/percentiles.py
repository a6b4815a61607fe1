from __future__ import annotations

import math
from dataclasses import replace
from typing import List, Sequence

from statkit.common.constants import DECILE_RANKS, QUARTILE_RANKS
from statkit.result import ErrorKind, Result, failure, success


def percentile(xs: Sequence[float], p: float) -> Result[float]:
    """
    p in [0, 100]

    Interpolates on ``rank = p/100 * (n + 1)``, clamping to the minimum below
    rank 1 and to the maximum at or above rank n.
    p == 0 returns 0.0, not the minimum.
    """
    if not xs:
        return failure(ErrorKind.EMPTY_SAMPLE, "percentile of an empty sample", op="percentile")
    if not 0 <= p <= 100:
        return failure(
            ErrorKind.INVALID_PERCENTILE,
            f"percentile must be in [0, 100], got {p}",
            op="percentile",
            p=p,
        )
    if p == 0:
        return success(0.0)

    ys = sorted(xs)
    n = len(ys)
    rank = (p / 100.0) * (n + 1)
    if rank < 1:
        return success(float(ys[0]))
    if rank >= n:
        return success(float(ys[-1]))

    f = math.floor(rank)
    frac = rank - f
    lo = ys[f - 1]
    hi = ys[f]
    return success(lo + frac * (hi - lo))


def quantiles(xs: Sequence[float], ranks: Sequence[float]) -> Result[List[float]]:
    if not xs or not ranks:
        return failure(
            ErrorKind.EMPTY_SAMPLE,
            "quantiles need a non-empty sample and at least one rank",
            value=[],
            op="quantiles",
        )
    out: List[float] = []
    for p in ranks:
        r = percentile(xs, p)
        if not r.ok:
            return replace(r, value=[])
        out.append(r.value)
    return success(out)


def quartiles(xs: Sequence[float], ranks: Sequence[float] = QUARTILE_RANKS) -> Result[List[float]]:
    """Percentiles at 5, 25, 50, 75 and 95."""
    return quantiles(xs, ranks)


def deciles(xs: Sequence[float], ranks: Sequence[float] = DECILE_RANKS) -> Result[List[float]]:
    return quantiles(xs, ranks)


def interquartile_range(xs: Sequence[float]) -> Result[float]:
    q3 = percentile(xs, 75)
    if not q3.ok:
        return q3
    q1 = percentile(xs, 25)
    if not q1.ok:
        return q1
    return success(q3.value - q1.value)
