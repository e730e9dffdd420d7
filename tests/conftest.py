"""Shared pytest fixtures for linesift tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from linesift.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration lookup at a per-test location and reset the singleton."""

    config_path = tmp_path / "linesift-config" / "config.toml"
    monkeypatch.setenv("LINESIFT_CONFIG", str(config_path))
    Config.reset()
    yield config_path
    Config.reset()


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[str, str], Path]:
    """Create an input file under ``tmp_path/inputs`` and return its path."""

    input_dir = tmp_path / "inputs"
    input_dir.mkdir(exist_ok=True)

    def _write(name: str, content: str) -> Path:
        path = input_dir / name
        _ = path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide an existing, empty output directory."""

    path = tmp_path / "out"
    path.mkdir()
    return path
