"""User configuration for the fspro CLI.

Configuration is stored in ~/.config/fspro/config.toml and holds the gzip
level used by ``fspro archive pack`` plus default include/exclude filters that
the CLI applies when no filter flags are given. Library calls never read
this file; they take their options explicitly.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fspro.core.paths import get_config_path
from fspro.filesystem.archive import DEFAULT_COMPRESSION_LEVEL
from fspro.filesystem.filters import FilterOptions

logger = logging.getLogger(__name__)


class FsproConfig(BaseModel):
    """Configuration for the fspro CLI.

    Attributes:
        compression_level: gzip compression level used when packing (0-9).
        filters: Filters applied by ``pack`` and ``move`` when the caller
            passes neither ``--include`` nor ``--exclude``.
    """

    model_config = ConfigDict(extra="forbid")

    compression_level: Annotated[
        int,
        Field(ge=0, le=9, description="gzip compression level (0-9)"),
    ] = DEFAULT_COMPRESSION_LEVEL
    filters: Annotated[
        FilterOptions,
        Field(default_factory=FilterOptions, description="Default name filters"),
    ]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FsproConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FsproConfig object.

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
        return FsproConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FsproConfig:
    """Load configuration, falling back to defaults when no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        The loaded FsproConfig, or a default one if the file is missing.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return FsproConfig()


def save_config(config: FsproConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FsproConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

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
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: FsproConfig) -> dict[str, object]:
    """Convert FsproConfig to a dictionary for TOML serialization.

    Args:
        config: The FsproConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "compression_level": config.compression_level,
        "filters": {
            "includes": list(config.filters.includes),
            "excludes": list(config.filters.excludes),
        },
    }
