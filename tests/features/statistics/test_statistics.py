"""Tests for statistics computation."""

import pytest

from linesift.features.classification import ClassifiedLines
from linesift.features.statistics import (
    NumericStatistics,
    StatisticsMode,
    StringStatistics,
    build_statistics_report,
    compute_numeric_statistics,
    compute_string_statistics,
)


def test_integer_statistics() -> None:
    stats = compute_numeric_statistics([1, 2, 3])

    assert stats == NumericStatistics(count=3, minimum=1, maximum=3, total=6.0, average=2.0)
    assert isinstance(stats.minimum, int)
    assert isinstance(stats.total, float)


def test_float_statistics() -> None:
    stats = compute_numeric_statistics([2.5, -1.5, 0.5])

    assert stats is not None
    assert stats.count == 3
    assert stats.minimum == -1.5
    assert stats.maximum == 2.5
    assert stats.total == pytest.approx(1.5)
    assert stats.average == pytest.approx(0.5)


def test_empty_sequences_have_no_statistics() -> None:
    assert compute_numeric_statistics([]) is None
    assert compute_string_statistics([]) is None


def test_string_lengths_count_characters() -> None:
    stats = compute_string_statistics(["abc", "é", "hello world"])

    assert stats == StringStatistics(count=3, shortest=1, longest=11)


def test_report_counts_every_category() -> None:
    report = build_statistics_report(ClassifiedLines(integers=[4], strings=["a", "bb"]))

    assert (report.integer_count, report.float_count, report.string_count) == (1, 0, 2)
    assert report.integers is not None
    assert report.floats is None
    assert report.strings == StringStatistics(count=2, shortest=1, longest=2)


@pytest.mark.parametrize(
    ("short", "full", "expected"),
    [
        (False, False, StatisticsMode.NONE),
        (True, False, StatisticsMode.SHORT),
        (False, True, StatisticsMode.FULL),
        (True, True, StatisticsMode.FULL),
    ],
)
def test_mode_from_flags(short: bool, full: bool, expected: StatisticsMode) -> None:
    assert StatisticsMode.from_flags(short=short, full=full) is expected
