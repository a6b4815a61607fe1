from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence

from statkit.result import ErrorKind, Result, failure, success


@dataclass(frozen=True)
class ModeResult:
    values: List[float] = field(default_factory=list)  # ascending
    count: int = 0


def mode(xs: Sequence[float]) -> Result[ModeResult]:
    """
    Every value sharing the highest occurrence count.

    Values are grouped by float equality, so computed inputs that differ in
    the last bit land in separate groups.
    """
    if not xs:
        return failure(ErrorKind.EMPTY_SAMPLE, "mode of an empty sample", value=ModeResult(), op="mode")

    counts: Counter = Counter(xs)
    top = max(counts.values())
    values = sorted(float(x) for x, c in counts.items() if c == top)
    return success(ModeResult(values=values, count=top))
