"""Load statkit configuration from pyproject.toml and optional .statkit.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import jsonschema

from statkit.common.constants import (
    BIN_EDGE_TOLERANCE,
    CONFIG_SCHEMA,
    DECILE_RANKS,
    QUARTILE_RANKS,
    SUMMARY_BINS,
)
from statkit.errors import ConfigError


@dataclass
class StatkitConfig:
    """Tunables for the binning and summary helpers."""

    # frequency_table: distance from the maximum still counted in the last bin
    bin_edge_tolerance: float = BIN_EDGE_TOLERANCE
    # Ranks passed to quartiles() / deciles() by DistSummary
    quartile_ranks: Tuple[float, ...] = QUARTILE_RANKS
    decile_ranks: Tuple[float, ...] = DECILE_RANKS
    # Number of histogram bins in a DistSummary
    summary_bins: int = SUMMARY_BINS
    # Level applied by configure_logging(config=...)
    log_level: str = "WARNING"


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return {}


def _validate(table: dict, source: str) -> None:
    validator = jsonschema.Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(table), key=lambda e: list(e.path))
    if errors:
        msg = "\n".join(f"  - {list(err.path)}: {err.message}" for err in errors)
        raise ConfigError(f"{source}: invalid statkit configuration:\n{msg}")


def _apply(cfg: StatkitConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key not in valid:
            continue
        if key in ("quartile_ranks", "decile_ranks"):
            val = tuple(float(v) for v in val)
        setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> StatkitConfig:
    """Load config from pyproject.toml [tool.statkit], then .statkit.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = StatkitConfig()

    pyproject = project_root / "pyproject.toml"
    table = _read_toml(pyproject).get("tool", {}).get("statkit", {})
    _validate(table, str(pyproject))
    _apply(cfg, table)

    local_path = project_root / ".statkit.toml"
    local = _read_toml(local_path)
    _validate(local, str(local_path))
    _apply(cfg, local)
    return cfg
