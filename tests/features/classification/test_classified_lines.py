"""Tests for the ClassifiedLines accumulator."""

from linesift.features.classification import (
    ClassifiedLines,
    FloatLine,
    IntegerLine,
    LineKind,
    StringLine,
)


def test_add_routes_by_kind_and_keeps_order() -> None:
    lines = ClassifiedLines()
    lines.extend(
        [
            IntegerLine(3),
            StringLine("b"),
            FloatLine(1.5),
            IntegerLine(1),
            StringLine("a"),
            IntegerLine(3),
        ]
    )

    assert lines.integers == [3, 1, 3]
    assert lines.floats == [1.5]
    assert lines.strings == ["b", "a"]
    assert lines.total == 6
    assert lines.count(LineKind.INTEGER) == 3


def test_rendered_uses_canonical_text() -> None:
    lines = ClassifiedLines(integers=[-7, 0], floats=[42.0, 1e16, -0.0], strings=["x y"])

    assert lines.rendered(LineKind.INTEGER) == ["-7", "0"]
    assert lines.rendered(LineKind.FLOAT) == ["42.0", "1e+16", "-0.0"]
    assert lines.rendered(LineKind.STRING) == ["x y"]


def test_labels() -> None:
    assert [kind.label for kind in LineKind] == ["Integers", "Floats", "Strings"]
