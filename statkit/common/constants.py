"""Shared defaults for statkit."""

# Ranks used by quartiles(); includes the 5th/95th whiskers, not only Q1-Q3.
QUARTILE_RANKS = (5.0, 25.0, 50.0, 75.0, 95.0)
DECILE_RANKS = (10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0)

# An element this close to the sample maximum is counted in the last bin.
BIN_EDGE_TOLERANCE = 1e-6

SUMMARY_BINS = 10

LOGGER_ROOT = "statkit"

# ── [tool.statkit] schema ───────────────────────────────────────────────────
_RANK_LIST = {
    "type": "array",
    "minItems": 1,
    "items": {"type": "number", "minimum": 0, "maximum": 100},
}

CONFIG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "bin_edge_tolerance": {"type": "number", "minimum": 0},
        "quartile_ranks": _RANK_LIST,
        "decile_ranks": _RANK_LIST,
        "summary_bins": {"type": "integer", "minimum": 1},
        "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
    },
}
