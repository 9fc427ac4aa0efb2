"""Desktop notification helpers for spotify-control."""

import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
from urllib.parse import unquote, urlparse

import requests
from loguru import logger

from spotify_control.core.config import NotificationsConfig


def notify(
    title: str,
    message: str,
    app_name: str = "Spotify Notify",
    icon: Optional[Path] = None,
    category: Optional[str] = None,
) -> bool:
    """
    Show a desktop notification using notify-send.

    Args:
        title: Notification title
        message: Notification message body
        app_name: Application name shown by the notification daemon
        icon: Optional image file used as the notification icon
        category: Optional category hint (e.g., 'music')

    Returns:
        True if notify-send ran successfully

    Note:
        Skips the notification if notify-send is not available.
        Errors are logged but don't interrupt program flow.
    """
    if not shutil.which("notify-send"):
        logger.warning("notify-send not found, skipping notification")
        return False

    cmd = ["notify-send", "--app-name", app_name]
    if icon:
        cmd += ["--icon", str(icon)]
    if category:
        cmd += ["--category", category]
    cmd += [title, message]

    try:
        result = subprocess.run(
            cmd,
            check=False,
            timeout=2.0,
            capture_output=True,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.warning(f"notify-send failed: {e}")
        return False

    if result.returncode != 0:
        logger.warning(f"notify-send exited with {result.returncode}")
        return False
    return True


@contextmanager
def cover_art_file(url: str, timeout: float = 5.0) -> Iterator[Optional[Path]]:
    """
    Make cover art available as a local file for the duration of the block.

    file:// URLs are used in place. Anything else is downloaded into a
    temporary file that is removed on exit. Yields None if the download fails.
    """
    parsed = urlparse(url)
    if parsed.scheme == "file":
        path = Path(unquote(parsed.path))
        yield path if path.exists() else None
        return

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Could not download cover art {url}: {e}")
        yield None
        return

    with tempfile.NamedTemporaryFile(prefix="spotify-control-cover-") as f:
        f.write(response.content)
        f.flush()
        yield Path(f.name)


def notify_now_playing(
    title: str, artists: str, album: str, art_url: str, config: NotificationsConfig
) -> bool:
    """Show the now-playing notification with the track's cover art."""
    if not config.enabled:
        logger.debug("Notifications disabled, skipping now-playing notification")
        return False

    if not shutil.which("notify-send"):
        logger.warning("notify-send not found, skipping notification")
        return False

    with cover_art_file(art_url or config.fallback_cover_url, config.timeout) as icon:
        return notify(
            title,
            f"{artists} - {album}",
            app_name=config.app_name,
            icon=icon,
            category="music",
        )
