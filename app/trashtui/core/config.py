"""Application configuration and settings.

This module provides the configuration model and I/O functions for
trashtui. Command-line options override the values read here.

Configuration is stored in ~/.config/trashtui/config.toml, e.g.:

    default_sort = "date"
    discovery = "home"
    date_format = "%Y-%m-%d %H:%M:%S"
"""

import logging
import os
import tomllib
from datetime import datetime
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trashtui.core.paths import get_config_path
from trashtui.trash.locator import DiscoveryStrategy
from trashtui.trash.models import DEFAULT_SORT_MODE, SortMode

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TrashConfig(BaseModel):
    """Configuration for the trash browser.

    Attributes:
        default_sort: Ordering applied at startup.
        discovery: How the trash root is located.
        date_format: strftime format for deletion dates.
    """

    model_config = ConfigDict(extra="forbid")

    default_sort: Annotated[
        SortMode,
        Field(description="Ordering applied at startup"),
    ] = DEFAULT_SORT_MODE
    discovery: Annotated[
        DiscoveryStrategy,
        Field(description="Trash discovery strategy (home or volume)"),
    ] = DiscoveryStrategy.HOME
    date_format: Annotated[
        str,
        Field(min_length=1, description="strftime format for deletion dates"),
    ] = DEFAULT_DATE_FORMAT

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Check that the format can render a datetime."""
        try:
            datetime(2000, 1, 1).strftime(v)
        except ValueError as e:
            msg = f"invalid date format {v!r}: {e}"
            raise ValueError(msg) from e
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> TrashConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TrashConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return TrashConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> TrashConfig:
    """Load configuration, falling back to defaults if the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return TrashConfig()


def save_config(config: TrashConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The TrashConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(mode="json"), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        # Cleanup temp file on failure
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
