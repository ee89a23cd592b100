"""
settings.py

This module provides application configuration management for Penknife.

Features:
- Centralized application configuration using Pydantic settings
- Location of the per-user marker configuration file
- Loading of marker overrides from JSON

Usage:
Import appsettings for application configuration values, and
`tokens_load` to build a `TokenConfig` from a JSON override file.
"""

import json
from pathlib import Path
from typing import Any, Final, Mapping, Optional
from appdirs import user_config_dir
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from penknife.lib.errors import ConfigurationError
from penknife.lib.log import LOG
from penknife.models.dataModel import TokenConfig
from rich.console import Console

# Console instance for rich output
console: Final[Console] = Console()

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("penknife", ""))
CONFIG_FILE: Final[Path] = CONFIG_DIR / "tokens.json"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with PNK_ prefix.

    Attributes:
        beQuiet: Suppress debug logging output
        max_depth: Maximum block nesting depth while rendering (0 disables)
        strict: Make the command line data resolver fail on missing values
        tokens_file: Optional JSON file with marker overrides
    """

    beQuiet: bool = True
    max_depth: int = 64
    strict: bool = False
    tokens_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="PNK_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",  # Allow additional attributes not defined in the model
    )


def tokens_build(
    overrides: Mapping[str, Any], base: Optional[TokenConfig] = None
) -> TokenConfig:
    """
    Apply marker overrides on top of a base configuration.

    Validation happens on a copy, so ``base`` is never modified.

    Args:
        overrides: Mapping of logical marker name to literal
        base: Configuration to start from; defaults if omitted

    Returns:
        TokenConfig: The new, validated configuration

    Raises:
        ConfigurationError: On an unknown marker name or an empty literal
    """
    base = base or TokenConfig()
    names = TokenConfig.names()
    for name in overrides:
        if name not in names:
            raise ConfigurationError(
                f"{name} is not a valid token name. Valid tokens are: "
                + ", ".join(names)
            )
    merged: dict[str, Any] = {**base.as_dict(), **dict(overrides)}
    try:
        return TokenConfig.model_validate(merged)
    except ValidationError as e:
        bad: str = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise ConfigurationError(f"Invalid value for token(s): {bad}") from e


def tokens_load(path: Optional[Path] = None) -> TokenConfig:
    """
    Load marker overrides from a JSON object file.

    A missing file yields the default configuration.

    Args:
        path: JSON file to read; defaults to the user configuration file

    Returns:
        TokenConfig: Defaults with the file's overrides applied

    Raises:
        ConfigurationError: If the file is not a JSON object of valid markers
    """
    path = path or appsettings.tokens_file or CONFIG_FILE
    if not path.exists():
        LOG(f"No token file at {path}; using default markers")
        return TokenConfig()

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Token file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Token file {path} must hold a JSON object")

    LOG(f"Loaded {len(data)} token override(s) from {path}")
    return tokens_build(data)


# Create the application settings instance
appsettings: Final[App] = App()
