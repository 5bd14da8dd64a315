"""Output field definitions and extraction."""

from __future__ import annotations

from numstats.summary.stats import Summary


# (display_name, attribute_on_Summary), in output order
FIELD_DEFS: list[tuple[str, str]] = [
    ("len",   "len"),
    ("sum",   "sum"),
    ("min",   "min"),
    ("max",   "max"),
    ("avg",   "mean"),
    ("std",   "std"),
    ("mode",  "mode"),
    ("mode#", "mode_count"),
    ("p50",   "p50"),
    ("p75",   "p75"),
    ("p90",   "p90"),
    ("p95",   "p95"),
    ("p99",   "p99"),
]


def extract_fields(summary: Summary) -> list[tuple[str, float | int]]:
    """Pair every display name with its value, in output order."""
    return [(name, getattr(summary, attr)) for name, attr in FIELD_DEFS]
