"""Tests for reading input files into classified lines."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from linesift.features.classification import ClassifiedLines, collect_lines, read_file
from linesift.shared.errors import FileAccessError


def test_blank_and_whitespace_lines_are_dropped(write_input: Callable[[str, str], Path]) -> None:
    path = write_input("a.txt", "  12  \n\n   \n\thello world\t\r\n3.5\n")
    lines = ClassifiedLines()

    collected = read_file(path, lines)

    assert collected == 3
    assert lines.integers == [12]
    assert lines.floats == [3.5]
    assert lines.strings == ["hello world"]


def test_files_are_read_in_argument_order(write_input: Callable[[str, str], Path]) -> None:
    first = write_input("first.txt", "1\nalpha\n2.5\n")
    second = write_input("second.txt", "beta\n2\n-0.5\n3")

    lines = collect_lines([first, second])

    assert lines.integers == [1, 2, 3]
    assert lines.floats == [2.5, -0.5]
    assert lines.strings == ["alpha", "beta"]


def test_every_non_blank_line_lands_in_exactly_one_sequence(
    write_input: Callable[[str, str], Path],
) -> None:
    content = "10\n\nx\n1.0\n  \n-3\n4.2e1\n42a\n"
    path = write_input("mixed.txt", content)

    lines = collect_lines([path])

    non_blank = [line.strip() for line in content.splitlines() if line.strip()]
    assert lines.total == len(non_blank)
    assert [str(v) for v in lines.integers] == ["10", "-3"]
    assert lines.floats == [1.0, 42.0]
    assert lines.strings == ["x", "42a"]


def test_missing_file_aborts(tmp_path: Path, write_input: Callable[[str, str], Path]) -> None:
    good = write_input("good.txt", "1\n")
    missing = tmp_path / "missing.txt"
    after = write_input("after.txt", "2\n")

    with pytest.raises(FileAccessError) as excinfo:
        _ = collect_lines([good, missing, after])

    assert excinfo.value.path == missing
    assert "Cannot read input file" in str(excinfo.value)


def test_directory_is_not_readable(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        _ = collect_lines([tmp_path])


def test_undecodable_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    _ = path.write_bytes(b"1\n\xff\xfe\n")

    with pytest.raises(FileAccessError, match="Cannot decode"):
        _ = collect_lines([path])


def test_custom_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    _ = path.write_bytes("café\n".encode("latin-1"))

    lines = collect_lines([path], encoding="latin-1")

    assert lines.strings == ["café"]


def test_logs_file_events(
    write_input: Callable[[str, str], Path], caplog: pytest.LogCaptureFixture
) -> None:
    path = write_input("a.txt", "1\nx\n")

    with caplog.at_level(logging.DEBUG, logger="linesift"):
        _ = collect_lines([path])

    events = [getattr(record, "processing_event", None) for record in caplog.records]
    assert "classification.file.start" in events
    assert "classification.file.complete" in events
    complete = next(
        r for r in caplog.records if getattr(r, "processing_event", None) == "classification.file.complete"
    )
    assert getattr(complete, "integers") == 1
    assert getattr(complete, "strings") == 1
