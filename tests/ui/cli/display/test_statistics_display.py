"""Tests for statistics display functionality."""

from io import StringIO

import pytest

from linesift.features.classification import ClassifiedLines
from linesift.features.statistics import StatisticsMode, build_statistics_report
from linesift.ui.cli.display import StatisticsDisplay


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def display(buffer: StringIO) -> StatisticsDisplay:
    from rich.console import Console

    return StatisticsDisplay(Console(file=buffer, color_system=None, width=200, soft_wrap=True))


def _lines(buffer: StringIO) -> list[str]:
    return buffer.getvalue().splitlines()


def test_short_statistics_print_three_counts_even_when_zero(
    display: StatisticsDisplay, buffer: StringIO
) -> None:
    report = build_statistics_report(ClassifiedLines())

    display.show(report, StatisticsMode.SHORT)

    assert _lines(buffer) == ["Short Statistics:", "Integers: 0", "Floats: 0", "Strings: 0"]


def test_full_statistics_for_integers(display: StatisticsDisplay, buffer: StringIO) -> None:
    report = build_statistics_report(ClassifiedLines(integers=[1, 2, 3]))

    display.show(report, StatisticsMode.FULL)

    assert _lines(buffer) == [
        "Full Statistics:",
        "Integers:",
        "  Count: 3",
        "  Min: 1",
        "  Max: 3",
        "  Sum: 6.0",
        "  Average: 2.0",
    ]


def test_full_statistics_cover_floats_and_strings(
    display: StatisticsDisplay, buffer: StringIO
) -> None:
    report = build_statistics_report(
        ClassifiedLines(floats=[1.5, -0.5], strings=["ab", "abcd", "[x]"])
    )

    display.show(report, StatisticsMode.FULL)

    assert _lines(buffer) == [
        "Full Statistics:",
        "Floats:",
        "  Count: 2",
        "  Min: -0.5",
        "  Max: 1.5",
        "  Sum: 1.0",
        "  Average: 0.5",
        "Strings:",
        "  Count: 3",
        "  Shortest length: 2",
        "  Longest length: 4",
    ]


def test_none_mode_prints_nothing(display: StatisticsDisplay, buffer: StringIO) -> None:
    report = build_statistics_report(ClassifiedLines(integers=[1]))

    display.show(report, StatisticsMode.NONE)
    display.show(None, StatisticsMode.FULL)

    assert buffer.getvalue() == ""
