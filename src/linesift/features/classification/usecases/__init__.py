"""Use cases for reading and classifying lines."""

from .classifier import INT64_MAX, INT64_MIN, classify_line, parse_float, parse_integer
from .file_reader import collect_lines, read_file

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "classify_line",
    "collect_lines",
    "parse_float",
    "parse_integer",
    "read_file",
]
