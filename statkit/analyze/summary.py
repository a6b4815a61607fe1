from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from statkit.analyze.binning import histogram
from statkit.analyze.central import mean, median
from statkit.analyze.dispersion import (
    mean_absolute_deviation,
    median_absolute_deviation,
    min_max_values,
    standard_deviation,
    value_range,
    variance,
)
from statkit.analyze.mode import mode
from statkit.analyze.percentiles import deciles, interquartile_range, quartiles
from statkit.config import StatkitConfig

_NAN = float("nan")


def _is_nan(x: float) -> bool:
    return x != x


def _fmt_num(x: float, nd: int = 4) -> str:
    if _is_nan(x):
        return "n/a"
    return f"{x:.{nd}f}"


def _json_num(x: float) -> Optional[float]:
    return None if _is_nan(x) else x


def _rank_label(p: float) -> str:
    return f"p{int(p)}" if float(p).is_integer() else f"p{p:g}"


@dataclass(frozen=True)
class DistSummary:
    n: int
    mean: float
    median: float
    min: float
    max: float
    range: float
    variance: float
    std: float
    mad: float
    median_ad: float
    iqr: float
    quartiles: Tuple[Tuple[float, float], ...] = ()  # (rank, value)
    deciles: Tuple[Tuple[float, float], ...] = ()
    modes: Tuple[float, ...] = ()
    mode_count: int = 0
    histogram: Tuple[int, ...] = ()

    @staticmethod
    def from_list(xs: Sequence[float], config: Optional[StatkitConfig] = None) -> "DistSummary":
        if not xs:
            return DistSummary(0, _NAN, _NAN, _NAN, _NAN, _NAN, _NAN, _NAN, _NAN, _NAN, _NAN)
        cfg = config or StatkitConfig()

        # Every statistic below is defined for a non-empty sample; unwrap()
        # only raises if that stops holding.
        lo, hi = min_max_values(xs).unwrap()
        q = quartiles(xs, ranks=cfg.quartile_ranks).unwrap()
        d = deciles(xs, ranks=cfg.decile_ranks).unwrap()
        m = mode(xs).unwrap()
        h = histogram(xs, cfg.summary_bins, tolerance=cfg.bin_edge_tolerance).unwrap()

        return DistSummary(
            n=len(xs),
            mean=mean(xs),
            median=median(xs),
            min=lo,
            max=hi,
            range=value_range(xs),
            variance=variance(xs).unwrap(),
            std=standard_deviation(xs).unwrap(),
            mad=mean_absolute_deviation(xs).unwrap(),
            median_ad=median_absolute_deviation(xs).unwrap(),
            iqr=interquartile_range(xs).unwrap(),
            quartiles=tuple(zip(cfg.quartile_ranks, q)),
            deciles=tuple(zip(cfg.decile_ranks, d)),
            modes=tuple(m.values),
            mode_count=m.count,
            histogram=tuple(h.counts),
        )


def summary_to_dict(s: DistSummary) -> Dict[str, Any]:
    """JSON-compatible view; NaN statistics become None."""
    return {
        "n": s.n,
        "mean": _json_num(s.mean),
        "median": _json_num(s.median),
        "min": _json_num(s.min),
        "max": _json_num(s.max),
        "range": _json_num(s.range),
        "variance": _json_num(s.variance),
        "std": _json_num(s.std),
        "mean_absolute_deviation": _json_num(s.mad),
        "median_absolute_deviation": _json_num(s.median_ad),
        "iqr": _json_num(s.iqr),
        "quartiles": {_rank_label(p): v for p, v in s.quartiles},
        "deciles": {_rank_label(p): v for p, v in s.deciles},
        "mode": {"values": list(s.modes), "count": s.mode_count},
        "histogram": list(s.histogram),
    }


def render_summary(s: DistSummary, title: str = "Sample Summary") -> str:
    lines: List[str] = []

    lines.append(title)
    lines.append("-" * 60)
    lines.append(f"n: {s.n}")
    if s.n == 0:
        lines.append("  (empty sample)")
        return "\n".join(lines)

    lines.append("")
    lines.append("central tendency:")
    lines.append(f"  mean={_fmt_num(s.mean)}  median={_fmt_num(s.median)}")
    modes = ", ".join(_fmt_num(v) for v in s.modes)
    lines.append(f"  mode=[{modes}] (count={s.mode_count})")

    lines.append("")
    lines.append("dispersion:")
    lines.append(f"  min={_fmt_num(s.min)}  max={_fmt_num(s.max)}  range={_fmt_num(s.range)}")
    lines.append(f"  variance={_fmt_num(s.variance)}  std={_fmt_num(s.std)}")
    lines.append(f"  mean_abs_dev={_fmt_num(s.mad)}  median_abs_dev={_fmt_num(s.median_ad)}  iqr={_fmt_num(s.iqr)}")

    lines.append("")
    lines.append("percentiles:")
    lines.append("  " + "  ".join(f"{_rank_label(p)}={_fmt_num(v)}" for p, v in s.quartiles))
    lines.append("deciles:")
    lines.append("  " + "  ".join(f"{_rank_label(p)}={_fmt_num(v)}" for p, v in s.deciles))

    lines.append("")
    lines.append(f"histogram ({len(s.histogram)} bins):")
    total = sum(s.histogram)
    for i, c in enumerate(s.histogram, start=1):
        share = 100.0 * c / total if total else 0.0
        lines.append(f"  - bin {i}: {c} ({round(share, 2)}%)")

    return "\n".join(lines)
