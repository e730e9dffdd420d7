"""Data structures describing the statistics printed after a run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatisticsMode(str, Enum):
    """How much statistics output a run produces."""

    NONE = "none"
    SHORT = "short"
    FULL = "full"

    @staticmethod
    def from_flags(short: bool, full: bool) -> "StatisticsMode":
        """Translate the ``-s``/``-f`` flags into a mode.

        Full statistics take precedence when both flags are given.
        """
        if full:
            return StatisticsMode.FULL
        if short:
            return StatisticsMode.SHORT
        return StatisticsMode.NONE


@dataclass(slots=True, frozen=True)
class NumericStatistics:
    """Aggregate figures for a non-empty numeric sequence."""

    count: int
    minimum: int | float
    maximum: int | float
    total: float
    average: float


@dataclass(slots=True, frozen=True)
class StringStatistics:
    """Length extremes for a non-empty string sequence."""

    count: int
    shortest: int
    longest: int


@dataclass(slots=True, frozen=True)
class StatisticsReport:
    """Counts for every category plus details for the non-empty ones."""

    integer_count: int
    float_count: int
    string_count: int
    integers: NumericStatistics | None
    floats: NumericStatistics | None
    strings: StringStatistics | None
