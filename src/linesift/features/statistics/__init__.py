# Where: linesift.features.statistics.__init__
# What: Expose statistics modes, result types and their computation.
# Why: Let the CLI render reports without reaching into use case modules.

from .domain.models import NumericStatistics, StatisticsMode, StatisticsReport, StringStatistics
from .usecases.statistics import (
    build_statistics_report,
    compute_numeric_statistics,
    compute_string_statistics,
)

__all__ = [
    "NumericStatistics",
    "StatisticsMode",
    "StatisticsReport",
    "StringStatistics",
    "build_statistics_report",
    "compute_numeric_statistics",
    "compute_string_statistics",
]
