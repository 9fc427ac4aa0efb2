"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    NotificationsConfig,
    PlayerConfig,
    SearchConfig,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)

# Output
from .output import log, log_error, setup_from_config, setup_loguru

__all__ = [
    "Config",
    "LoggingConfig",
    "NotificationsConfig",
    "PlayerConfig",
    "SearchConfig",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    "log",
    "log_error",
    "setup_from_config",
    "setup_loguru",
]
