"""
Configuration management for Notiflog.

Uses XDG base directories:
- Config: ~/.config/notiflog/config.toml
- Data: ~/.local/share/notiflog/ (the log database)
"""

from pathlib import Path
from typing import Any
import logging
import os

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_DATA_HOME = Path.home() / ".local" / "share"

DB_FILENAME = "logs.db"


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/notiflog)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "notiflog"


def get_notiflog_home() -> Path:
    """Get the data directory (NOTIFLOG_HOME or XDG_DATA_HOME/notiflog)."""
    if env_home := os.environ.get("NOTIFLOG_HOME"):
        return Path(env_home)
    base = Path(os.environ.get("XDG_DATA_HOME", DEFAULT_DATA_HOME))
    return base / "notiflog"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_db_path() -> Path:
    """
    Get the path to the log database.

    NOTIFLOG_DB wins over [store].path in config.toml, which wins over
    the default file in the data directory.
    """
    if env_db := os.environ.get("NOTIFLOG_DB"):
        return Path(env_db)

    store_config = load_config().get("store", {})
    if configured := store_config.get("path"):
        return Path(configured).expanduser()

    return get_notiflog_home() / DB_FILENAME


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return get_default_config()

    # Lazy import tomli only when needed
    import tomli

    with open(config_path, "rb") as f:
        return tomli.load(f)


def get_log_level(config: dict[str, Any] | None = None) -> str:
    """Get the configured log level name (defaults to WARNING)."""
    config = config if config is not None else load_config()
    level = config.get("logging", {}).get("level", "WARNING")
    return str(level).upper()


def setup_logging() -> None:
    """Configure root logging from config.toml ([logging].level).

    A config file that cannot be read falls back to WARNING.
    """
    try:
        level = get_log_level()
    except Exception:
        level = "WARNING"

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level, logging.WARNING),
    )


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "logging": {
            "level": "WARNING",
        },
    }
