"""
Summary: Tagged line variants and the ordered accumulator they are collected into.
Why: Replace three loosely coupled lists with one explicit value threaded through a run.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, Final


class LineKind(StrEnum):
    """Category a classified line belongs to.

    The value doubles as the output file stem (``integers.txt`` and so on).
    """

    INTEGER = "integers"
    FLOAT = "floats"
    STRING = "strings"

    @property
    def label(self) -> str:
        """Capitalised category name used in statistics output."""

        return self.value.capitalize()


@dataclass(slots=True, frozen=True)
class IntegerLine:
    """A line holding a whole number within the signed 64-bit range."""

    kind: ClassVar[LineKind] = LineKind.INTEGER

    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True)
class FloatLine:
    """A line holding a finite double-precision number."""

    kind: ClassVar[LineKind] = LineKind.FLOAT

    value: float

    def render(self) -> str:
        return repr(self.value)


@dataclass(slots=True, frozen=True)
class StringLine:
    """A line that is neither an integer nor a float."""

    kind: ClassVar[LineKind] = LineKind.STRING

    value: str

    def render(self) -> str:
        return self.value


ClassifiedLine = IntegerLine | FloatLine | StringLine

LINE_KINDS: Final[tuple[LineKind, ...]] = (LineKind.INTEGER, LineKind.FLOAT, LineKind.STRING)


@dataclass(slots=True)
class ClassifiedLines:
    """Ordered integers, floats and strings collected during a run."""

    integers: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)

    def add(self, line: ClassifiedLine) -> None:
        """Append ``line`` to the sequence matching its kind."""

        if isinstance(line, IntegerLine):
            self.integers.append(line.value)
        elif isinstance(line, FloatLine):
            self.floats.append(line.value)
        else:
            self.strings.append(line.value)

    def extend(self, lines: Iterable[ClassifiedLine]) -> None:
        """Append every line in ``lines`` preserving order."""

        for line in lines:
            self.add(line)

    def values(self, kind: LineKind) -> list[int] | list[float] | list[str]:
        """Return the sequence collected for ``kind``."""

        if kind is LineKind.INTEGER:
            return self.integers
        if kind is LineKind.FLOAT:
            return self.floats
        return self.strings

    def rendered(self, kind: LineKind) -> list[str]:
        """Return the canonical text of every value collected for ``kind``."""

        if kind is LineKind.INTEGER:
            return [IntegerLine(value).render() for value in self.integers]
        if kind is LineKind.FLOAT:
            return [FloatLine(value).render() for value in self.floats]
        return list(self.strings)

    def count(self, kind: LineKind) -> int:
        return len(self.values(kind))

    @property
    def total(self) -> int:
        """Number of lines collected across all three sequences."""

        return len(self.integers) + len(self.floats) + len(self.strings)


__all__ = [
    "ClassifiedLine",
    "ClassifiedLines",
    "FloatLine",
    "IntegerLine",
    "LINE_KINDS",
    "LineKind",
    "StringLine",
]
