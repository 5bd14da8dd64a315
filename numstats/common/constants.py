"""Shared constants for the stats command."""

PROGNAME = "stats"
VERSION = "0.1.0"

# Path token that selects standard input instead of a file
STDIN_SENTINEL = "-"

# ── Percentile table (single source of truth) ───────────────────────────────
# (field name, rank fraction); fractions must lie strictly inside ]0, 1[
PERCENTILES: tuple[tuple[str, float], ...] = (
    ("p50", 0.50),
    ("p75", 0.75),
    ("p90", 0.90),
    ("p95", 0.95),
    ("p99", 0.99),
)

# ── Output formatting ───────────────────────────────────────────────────────
FIXED_DIGITS = 5        # decimal places with --fixed
NAME_WIDTH = 6          # column width of the stat name in the long layout
