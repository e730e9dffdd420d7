"""
Summary: Compute count, extremes, sum and average over classified lines.
Why: Keep arithmetic separate from console rendering so both are testable alone.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from linesift.features.classification.domain.models import ClassifiedLines
from linesift.features.statistics.domain.models import (
    NumericStatistics,
    StatisticsReport,
    StringStatistics,
)


def compute_numeric_statistics(values: Sequence[int] | Sequence[float]) -> NumericStatistics | None:
    """Summarise ``values``; return None for an empty sequence.

    The sum is accumulated in double precision even for integers.
    """
    if not values:
        return None
    total = math.fsum(float(value) for value in values)
    return NumericStatistics(
        count=len(values),
        minimum=min(values),
        maximum=max(values),
        total=total,
        average=total / len(values),
    )


def compute_string_statistics(values: Sequence[str]) -> StringStatistics | None:
    """Return count and length extremes of ``values``; None when empty."""

    if not values:
        return None
    lengths = [len(value) for value in values]
    return StringStatistics(count=len(values), shortest=min(lengths), longest=max(lengths))


def build_statistics_report(lines: ClassifiedLines) -> StatisticsReport:
    """Compute every figure the short and full reports can show."""

    return StatisticsReport(
        integer_count=len(lines.integers),
        float_count=len(lines.floats),
        string_count=len(lines.strings),
        integers=compute_numeric_statistics(lines.integers),
        floats=compute_numeric_statistics(lines.floats),
        strings=compute_string_statistics(lines.strings),
    )


__all__ = ["build_statistics_report", "compute_numeric_statistics", "compute_string_statistics"]
