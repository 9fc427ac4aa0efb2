"""
Configuration management for spotify-control
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_SERVICE_NAME = "org.mpris.MediaPlayer2.spotify"
DEFAULT_OBJECT_PATH = "/org/mpris/MediaPlayer2"
DEFAULT_SEARCH_URL = "https://spotify-search-api-test.herokuapp.com/search/tracks"
DEFAULT_COVER_URL = "https://www.scdn.co/i/_global/touch-icon-144.png"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PlayerConfig:
    """Configuration for the D-Bus media player target."""

    service_name: str = DEFAULT_SERVICE_NAME
    object_path: str = DEFAULT_OBJECT_PATH
    timeout: float = 5.0

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.service_name:
            raise ValueError("service_name must not be empty")
        if not self.object_path.startswith("/"):
            raise ValueError(f"object_path must be absolute: {self.object_path}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")


@dataclass
class SearchConfig:
    """Configuration for the track search endpoint."""

    url: str = DEFAULT_SEARCH_URL
    default_count: int = 5
    timeout: float = 10.0

    def validate(self) -> None:
        """Validate search configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.url:
            raise ValueError("url must not be empty")
        if self.default_count < 1:
            raise ValueError(f"default_count must be at least 1: {self.default_count}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")


@dataclass
class NotificationsConfig:
    """Configuration for desktop notifications."""

    enabled: bool = True
    app_name: str = "Spotify Notify"
    fallback_cover_url: str = DEFAULT_COVER_URL
    timeout: float = 5.0  # Cover art download timeout

    def validate(self) -> None:
        """Validate notification configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.app_name:
            raise ValueError("app_name must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/spotify-control/spotify-control.log)
    )
    console_output: bool = False  # Also output to stderr (for debugging)

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"level must be one of {', '.join(LOG_LEVELS)}: {self.level!r}"
            )


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "spotify-control"
    return Path.home() / ".config" / "spotify-control"


def get_config_path() -> Path:
    """Get the main configuration file path."""
    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "spotify-control"
    return Path.home() / ".local" / "share" / "spotify-control"


def _coerce(value: Any, kind: type, key: str) -> Any:
    """Check a TOML value against the expected type, allowing int for float."""
    if kind is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if kind is int and isinstance(value, bool):
        raise ValueError(f"{key} must be {kind.__name__}, got {value!r}")
    if not isinstance(value, kind):
        raise ValueError(f"{key} must be {kind.__name__}, got {value!r}")
    return value


def _section(toml_data: Dict[str, Any], name: str, default: Any) -> Any:
    """Build one config section from TOML, keeping defaults for absent keys.

    Invalid sections print a warning and fall back to defaults.
    """
    data = toml_data.get(name)
    if data is None:
        return default

    try:
        if not isinstance(data, dict):
            raise ValueError(f"[{name}] must be a table")

        values = {}
        for key, current in vars(default).items():
            if key not in data:
                continue
            if current is None:
                values[key] = _coerce(data[key], str, key)
            else:
                values[key] = _coerce(data[key], type(current), key)

        section = type(default)(**values)
        if hasattr(section, "validate"):
            section.validate()
        return section

    except ValueError as e:
        print(f"Warning: Invalid {name} configuration: {e}")
        print(f"Using default {name} configuration.")
        return default


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides on top of the file values."""
    service_name = os.environ.get("SPOTIFY_CONTROL_SERVICE_NAME")
    if service_name:
        config.player.service_name = service_name

    search_url = os.environ.get("SPOTIFY_CONTROL_SEARCH_URL")
    if search_url:
        config.search.url = search_url

    log_level = os.environ.get("SPOTIFY_CONTROL_LOG_LEVEL")
    if log_level:
        try:
            LoggingConfig(level=log_level).validate()
            config.logging.level = log_level.upper()
        except ValueError as e:
            print(f"Warning: Invalid logging configuration: {e}")
            print(f"Keeping log level {config.logging.level}.")

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - SPOTIFY_CONTROL_SERVICE_NAME
    - SPOTIFY_CONTROL_SEARCH_URL
    - SPOTIFY_CONTROL_LOG_LEVEL
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if not config_path.exists():
        return _apply_env_overrides(config)

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        print(f"Warning: Could not read {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(config)

    config.player = _section(toml_data, "player", config.player)
    config.search = _section(toml_data, "search", config.search)
    config.notifications = _section(toml_data, "notifications", config.notifications)
    config.logging = _section(toml_data, "logging", config.logging)

    return _apply_env_overrides(config)
