"""
Unified output system using Loguru.
User-facing messages are printed and written to the log file in one call.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Config, get_data_dir
from .console import get_error_console


def get_log_file_path() -> Path:
    """Get the path to the log file."""
    return get_data_dir() / "spotify-control.log"


def setup_loguru(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    console_output: bool = False,
) -> None:
    """
    Configure loguru for file logging, optionally mirrored to stderr.

    Args:
        log_file: Path to log file (default: ~/.local/share/spotify-control/spotify-control.log)
        level: Minimum level for logging (DEBUG, INFO, WARNING, ERROR)
        console_output: Whether to also write log records to stderr
    """
    log_file = log_file or get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.debug(f"Loguru initialized: {log_file} (level={level})")


def setup_from_config(config: Config, verbose: bool = False) -> None:
    """Configure logging from the [logging] config section."""
    log_file = Path(config.logging.log_file).expanduser() if config.logging.log_file else None
    setup_loguru(
        log_file=log_file,
        level=config.logging.level.upper(),
        console_output=verbose or config.logging.console_output,
    )


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints to stdout.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)
    print(message)


def log_error(message: str) -> None:
    """Log an error and print it to stderr."""
    logger.error(message)
    get_error_console().print(
        f"Error: {message}",
        style="bold red",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
