"""
Summary: Classify a trimmed line as an integer, a float or an opaque string.
Why: Keep the integer-then-float-then-string rule in one pure, non-throwing function.
"""

from __future__ import annotations

import math
import re
from typing import Final

from linesift.features.classification.domain.models import (
    ClassifiedLine,
    FloatLine,
    IntegerLine,
    StringLine,
)

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
_INT64_MAX_DIGITS: Final[int] = len(str(INT64_MAX))

# ASCII digits only; ``\d`` would also accept other Unicode decimal digits.
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def parse_integer(text: str) -> int | None:
    """Parse ``text`` as a signed 64-bit whole number.

    Args:
        text: Trimmed line content.

    Returns:
        int | None: The value, or None when the syntax is wrong or the value
        does not fit in 64 bits.
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    # int() refuses very long digit strings; past 19 significant digits it overflows anyway.
    if len(text.lstrip("+-").lstrip("0")) > _INT64_MAX_DIGITS:
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float(text: str) -> float | None:
    """Parse ``text`` as a finite decimal or exponential number.

    Args:
        text: Trimmed line content.

    Returns:
        float | None: The value, or None when the syntax is wrong or the
        magnitude overflows a double.
    """
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def classify_line(text: str) -> ClassifiedLine:
    """Classify a trimmed, non-empty line.

    Integers are tried first, so ``"3"`` is an integer while ``"3.0"`` is a
    float; anything neither parser accepts is kept verbatim as a string.
    """
    integer = parse_integer(text)
    if integer is not None:
        return IntegerLine(integer)

    number = parse_float(text)
    if number is not None:
        return FloatLine(number)

    return StringLine(text)


__all__ = ["INT64_MAX", "INT64_MIN", "classify_line", "parse_float", "parse_integer"]
