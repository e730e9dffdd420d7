"""Smoke tests for unified entry points.

These tests assert that `python -m linesift` and the console script
both resolve to the CLI's `main` function exposed under `linesift.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m linesift` path exposes a `main` callable."""
    m = import_module("linesift.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `linesift.ui.cli:main` and is importable."""
    m = import_module("linesift.ui.cli")
    assert hasattr(m, "main")
