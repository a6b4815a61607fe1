from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Sequence

from statkit.common.constants import BIN_EDGE_TOLERANCE
from statkit.result import ErrorKind, Result, failure, success


@dataclass(frozen=True)
class FrequencyBin:
    """
    One equal-width bin: [bin_range_min, bin_range_max).
    The last bin of a table also includes its upper bound.
    """
    bin_number: int  # 1-based
    bin_range_min: float
    bin_range_max: float
    count: int


@dataclass(frozen=True)
class Histogram:
    bins: List[FrequencyBin] = field(default_factory=list)
    counts: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class CumulativeDensity:
    cumulative: List[int] = field(default_factory=list)
    normalized: List[float] = field(default_factory=list)


def frequency_table(
    xs: Sequence[float],
    num_bins: int,
    tolerance: float = BIN_EDGE_TOLERANCE,
) -> Result[List[FrequencyBin]]:
    """
    Partition [min, max] into *num_bins* equal-width bins and count members.

    Values within *tolerance* of the maximum are counted in the last bin, so
    the counts always sum to len(xs).  When every value is equal the width is
    zero and the whole sample lands in the last bin.
    """
    if not xs:
        return failure(ErrorKind.EMPTY_SAMPLE, "frequency table of an empty sample", value=[], op="frequency_table")
    if num_bins < 1:
        return failure(
            ErrorKind.INVALID_BIN_COUNT,
            f"bin count must be a positive integer, got {num_bins}",
            value=[],
            op="frequency_table",
            num_bins=num_bins,
        )

    lo_all = float(min(xs))
    hi_all = float(max(xs))
    width = (hi_all - lo_all) / num_bins

    edges = [lo_all + i * width for i in range(num_bins + 1)]
    last = num_bins - 1
    counts = [0] * num_bins
    for x in xs:
        # Each value is placed in exactly one bin: the index guess is
        # corrected against the same edges the records report.
        if width > 0:
            i = min(int((x - lo_all) / width), last)
            while i > 0 and x < edges[i]:
                i -= 1
            while i < last and x >= edges[i + 1]:
                i += 1
        else:
            i = last
        if x < edges[i + 1] or (i == last and abs(x - hi_all) <= tolerance):
            counts[i] += 1

    table = [
        FrequencyBin(bin_number=i + 1, bin_range_min=edges[i], bin_range_max=edges[i + 1], count=counts[i])
        for i in range(num_bins)
    ]
    return success(table)


def histogram(
    xs: Sequence[float],
    num_bins: int,
    tolerance: float = BIN_EDGE_TOLERANCE,
) -> Result[Histogram]:
    table = frequency_table(xs, num_bins, tolerance=tolerance)
    if not table.ok:
        return replace(table, value=Histogram())
    return success(Histogram(bins=table.value, counts=[b.count for b in table.value]))


def histogram_cumulative_density(counts: Sequence[int]) -> Result[CumulativeDensity]:
    """
    Running totals of *counts* and the same totals divided by the grand total.

    The last normalized entry is pinned to exactly 1.0.  An all-zero input
    normalizes to zeros (then the pinned 1.0).
    """
    if not counts:
        return failure(
            ErrorKind.EMPTY_SAMPLE,
            "cumulative density of an empty count sequence",
            value=CumulativeDensity(),
            op="histogram_cumulative_density",
        )

    cumulative: List[int] = []
    running = 0
    for c in counts:
        running += c
        cumulative.append(running)

    total = cumulative[-1]
    normalized = [(c / total) if total else 0.0 for c in cumulative]
    normalized[-1] = 1.0
    return success(CumulativeDensity(cumulative=cumulative, normalized=normalized))
