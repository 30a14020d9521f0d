"""
Configuration management for Jotter.

Uses XDG base directories:
- Config: ~/.config/jotter/config.toml
- Data: ~/.local/share/jotter/ (notes live in notes/ below it)
"""

from pathlib import Path
from typing import Any
import logging
import os

from jotter.exceptions import ConfigError, DirectoryResolutionFailure

APP_NAME = "jotter"
NOTES_SUBDIR = "notes"


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise DirectoryResolutionFailure(
            f"Failed to resolve app data dir: {e}"
        ) from e


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/jotter)."""
    if env_base := os.environ.get("XDG_CONFIG_HOME"):
        return Path(env_base) / APP_NAME
    return _home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist.
    Raises ConfigError if it can't be read, parsed, or has the wrong shape.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return get_default_config()

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            config = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file ({config_path}): {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file ({config_path}): {e}") from e

    for section in ("jotter", "logging"):
        if not isinstance(config.setdefault(section, {}), dict):
            raise ConfigError(
                f"Invalid config file ({config_path}): [{section}] must be a table"
            )

    return config


def get_config_str(config: dict[str, Any], section: str, key: str) -> str | None:
    """Get an optional string setting, rejecting any other type."""
    value = config.get(section, {}).get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(
            f"Invalid config value: {section}.{key} must be a string, "
            f"got {type(value).__name__}"
        )
    return value


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "jotter": {},
        "logging": {},
    }


def get_app_data_dir() -> Path:
    """
    Get the application data directory.

    Resolution order: JOTTER_HOME, [jotter] data_dir in config.toml,
    then XDG_DATA_HOME/jotter (~/.local/share/jotter).
    """
    if env_home := os.environ.get("JOTTER_HOME"):
        return Path(env_home).expanduser().absolute()

    configured = get_config_str(load_config(), "jotter", "data_dir")
    if configured:
        return Path(configured).expanduser().absolute()

    if env_base := os.environ.get("XDG_DATA_HOME"):
        return Path(env_base).absolute() / APP_NAME
    return _home() / ".local" / "share" / APP_NAME


def get_notes_dir() -> Path:
    """Get the notes directory (<app data dir>/notes)."""
    return get_app_data_dir() / NOTES_SUBDIR


def get_log_level(default: str = "WARNING") -> str:
    """Get the log level name (JOTTER_LOG_LEVEL, then [logging] level)."""
    level = os.environ.get("JOTTER_LOG_LEVEL") or get_config_str(
        load_config(), "logging", "level"
    )
    if not level:
        return default
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level: {level}")
    return level
