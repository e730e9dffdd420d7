"""Configuration loading for linesift."""

from linesift.config.config import Config
from linesift.config.paths import default_config_path, resolve_overridable_path

__all__ = ["Config", "default_config_path", "resolve_overridable_path"]
