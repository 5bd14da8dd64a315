"""Rendering of statistics records in long and compact layouts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from numstats.common.console import bold
from numstats.common.constants import FIXED_DIGITS, NAME_WIDTH
from numstats.summary.fields import FIELD_DEFS, extract_fields
from numstats.summary.stats import Summary


@dataclass(frozen=True)
class DisplayOptions:
    """Presentation switches chosen once per run."""

    compact: bool = False        # one line per input unit
    separators: bool = False     # thousands grouping
    fixed: bool = False          # FIXED_DIGITS decimal places


def format_number(
    value: float | int, *, separators: bool = False, fixed: bool = False
) -> str:
    """Format one statistic.

    Counts print as integers. Floats print either with ``FIXED_DIGITS``
    decimals or, by default, as the shortest decimal that round-trips,
    written out positionally (no exponent) and without a trailing ``.0``.
    """
    if isinstance(value, int):
        return f"{value:,}" if separators else str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if fixed:
        fmt = f",.{FIXED_DIGITS}f" if separators else f".{FIXED_DIGITS}f"
        return format(value, fmt)

    text = format(Decimal(repr(value)), ",f" if separators else "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def title_line() -> str:
    """Column titles for the compact layout."""
    return " ".join(["filename", *(name for name, _ in FIELD_DEFS)])


def render_long(label: str, summary: Summary, options: DisplayOptions) -> str:
    """One stat per line, each prefixed by its name."""
    lines = [bold(label)]
    for name, value in extract_fields(summary):
        text = format_number(value, separators=options.separators, fixed=options.fixed)
        lines.append(f"  {name:<{NAME_WIDTH}}  {text}")
    return "\n".join(lines)


def render_compact(label: str, summary: Summary, options: DisplayOptions) -> str:
    """All stats on a single line after the label."""
    parts = [label]
    for _, value in extract_fields(summary):
        parts.append(
            format_number(value, separators=options.separators, fixed=options.fixed)
        )
    return " ".join(parts)


def render(label: str, summary: Summary, options: DisplayOptions) -> str:
    if options.compact:
        return render_compact(label, summary, options)
    return render_long(label, summary, options)
