"""Descriptive statistics over one input unit's values."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from numstats.common.constants import PERCENTILES


@dataclass(frozen=True)
class Summary:
    """Statistics record for a single input unit."""

    len: int
    sum: float
    min: float
    max: float
    mean: float
    std: float                   # population standard deviation
    mode: float                  # smallest of the most frequent values
    mode_count: int
    p50: float
    p75: float
    p90: float
    p95: float
    p99: float


def percentile(ordered: Sequence[float], p: float) -> float:
    """Nearest-rank percentile of an ascending sequence, by truncation.

    Picks the element at ``int(len * p)`` with no interpolation, so the
    median of an even-length sequence is the upper of the two middle
    values. Empty input gives NaN.
    """
    if not 0.0 < p < 1.0:
        raise ValueError(f"percentile must be in the range ]0,1[, got {p}")
    n = len(ordered)
    if n == 0:
        return math.nan
    return float(ordered[int(n * p)])


def summarize(values: Sequence[float]) -> Summary:
    """Compute the full statistics record for *values*.

    Never raises for empty input: every float field that needs at least
    one value comes out as NaN, and ``mode_count`` is 0.
    """
    ordered = np.sort(np.asarray(values, dtype=np.float64)).tolist()
    n = len(ordered)

    cuts = {name: percentile(ordered, p) for name, p in PERCENTILES}

    total = 0.0
    total_sq = 0.0
    mode_value = math.nan
    mode_count = 0
    run_value = math.nan
    run_count = 0
    for x in ordered:
        total += x
        total_sq += x * x

        if x == run_value:
            run_count += 1
        else:
            # Strictly greater: an equal later run never beats an earlier one
            if run_count > mode_count:
                mode_value, mode_count = run_value, run_count
            run_count = 1
        run_value = x

    if run_count > mode_count:
        mode_value, mode_count = run_value, run_count

    # Naive one-pass variance, see
    # https://en.wikipedia.org/wiki/Algorithms_for_calculating_variance#Na%C3%AFve_algorithm
    count = np.float64(n)
    with np.errstate(divide="ignore", invalid="ignore"):
        mean = np.float64(total) / count
        std = np.sqrt((total_sq - total * total / count) / count)

    return Summary(
        len=n,
        sum=total,
        min=ordered[0] if ordered else math.nan,
        max=ordered[-1] if ordered else math.nan,
        mean=float(mean),
        std=float(std),
        mode=mode_value,
        mode_count=mode_count,
        **cuts,
    )
