"""Configuration management for linesift."""

from __future__ import annotations

import codecs
import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from linesift.config.paths import default_config_path
from linesift.platform.logging import logger
from linesift.shared.errors import ConfigError


_LOG_LEVEL_NAMES: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Default output directory when ``-o`` is not given
    output_dir: Path | None = _path_field()

    # Default filename prefix when ``-p`` is not given
    prefix: str = ""

    # Text encoding for input and output files
    encoding: str = "utf-8"

    # Console log level name
    log_level: str = "WARNING"

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate scalar settings.

        Raises:
            ConfigError: If the encoding or log level is not recognised.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        try:
            _ = codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"Unknown encoding in configuration: {self.encoding}") from e

        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVEL_NAMES:
            raise ConfigError(f"Unknown log level in configuration: {self.log_level}")

    @property
    def console_level(self) -> int:
        """Numeric logging level for the console handler."""

        return logging.getLevelName(self.log_level)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML table.

        Unknown keys are ignored with a warning so older binaries keep working
        against newer configuration files.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            if key in {"prefix", "encoding", "log_level"} and not isinstance(value, str):
                raise ConfigError(f"Configuration key '{key}' must be a string")
            values[key] = value
        return cls(**values)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to load configuration {config_file}: {e}") from e

            instance = cls.from_dict(config_dict)
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
