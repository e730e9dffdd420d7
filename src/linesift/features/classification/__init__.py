# Where: linesift.features.classification.__init__
# What: Expose line variants, the accumulator, and the classification use cases.
# Why: Provide a cohesive import surface for the application and UI layers.

from .domain.models import (
    LINE_KINDS,
    ClassifiedLine,
    ClassifiedLines,
    FloatLine,
    IntegerLine,
    LineKind,
    StringLine,
)
from .usecases.classifier import classify_line, parse_float, parse_integer
from .usecases.file_reader import collect_lines, read_file

__all__ = [
    "LINE_KINDS",
    "ClassifiedLine",
    "ClassifiedLines",
    "FloatLine",
    "IntegerLine",
    "LineKind",
    "StringLine",
    "classify_line",
    "collect_lines",
    "parse_float",
    "parse_integer",
    "read_file",
]
