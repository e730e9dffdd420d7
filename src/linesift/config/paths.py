"""Shared path utilities for configuration locations.

Policy:
- Config: ``$LINESIFT_CONFIG`` when set, otherwise
  ``$XDG_CONFIG_HOME/linesift/config.toml`` with ``~/.config`` as the
  fallback base directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "LINESIFT_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_APP_DIR_NAME: Final[str] = "linesift"
_CONFIG_FILE_NAME: Final[str] = "config.toml"


def resolve_overridable_path(
    *,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path, letting a non-blank environment variable win."""

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_config_home(env: Mapping[str, str] | None = None) -> Path:
    """Return the XDG base directory for user configuration."""

    mapping = env if env is not None else os.environ
    raw = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    if raw:
        return Path(raw)
    return Path.home() / ".config"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file.

    Args:
        env: Environment mapping to consult instead of ``os.environ``.

    Returns:
        Path: Absolute location of the configuration file. The file may not exist.
    """
    return resolve_overridable_path(
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _xdg_config_home(env) / _APP_DIR_NAME / _CONFIG_FILE_NAME,
    )


__all__ = ["default_config_path", "resolve_overridable_path"]
