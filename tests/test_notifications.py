"""Tests for desktop notification helpers."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from fakes import make_response
from spotify_control.core.config import NotificationsConfig
from spotify_control.notifications import cover_art_file, notify, notify_now_playing


def _completed(returncode: int = 0) -> MagicMock:
    return MagicMock(returncode=returncode)


class TestNotify:
    """Tests for notify."""

    def test_builds_notify_send_command(self) -> None:
        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("subprocess.run", return_value=_completed()) as mock_run:
            assert notify("Title", "Body", icon=Path("/tmp/cover"), category="music")

        cmd = mock_run.call_args.args[0]
        assert cmd == [
            "notify-send",
            "--app-name", "Spotify Notify",
            "--icon", "/tmp/cover",
            "--category", "music",
            "Title", "Body",
        ]

    def test_without_icon(self) -> None:
        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("subprocess.run", return_value=_completed()) as mock_run:
            notify("Title", "Body")

        assert "--icon" not in mock_run.call_args.args[0]

    def test_skipped_when_notify_send_missing(self) -> None:
        with patch("shutil.which", return_value=None), patch("subprocess.run") as mock_run:
            assert notify("Title", "Body") is False
        mock_run.assert_not_called()

    def test_failure_does_not_raise(self) -> None:
        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("subprocess.run", side_effect=subprocess.TimeoutExpired("notify-send", 2.0)):
            assert notify("Title", "Body") is False

    def test_nonzero_exit(self) -> None:
        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("subprocess.run", return_value=_completed(1)):
            assert notify("Title", "Body") is False


class TestCoverArtFile:
    """Tests for cover_art_file."""

    def test_downloads_to_temp_file_and_cleans_up(self) -> None:
        response = make_response()
        response.content = b"\x89PNG fake"

        with patch("requests.get", return_value=response) as mock_get:
            with cover_art_file("https://i.scdn.co/image/abc", timeout=3.0) as path:
                assert path.read_bytes() == b"\x89PNG fake"
                saved = path

        mock_get.assert_called_once_with("https://i.scdn.co/image/abc", timeout=3.0)
        assert not saved.exists()

    def test_download_failure_yields_none(self) -> None:
        with patch("requests.get", side_effect=requests.ConnectionError("offline")):
            with cover_art_file("https://i.scdn.co/image/abc") as path:
                assert path is None

    def test_file_url_used_in_place(self, tmp_path) -> None:
        cover = tmp_path / "cover art.png"
        cover.write_bytes(b"png")

        with patch("requests.get") as mock_get:
            with cover_art_file(cover.as_uri()) as path:
                assert path == cover

        mock_get.assert_not_called()
        assert cover.exists()

    def test_missing_local_file_yields_none(self, tmp_path) -> None:
        with cover_art_file((tmp_path / "missing.png").as_uri()) as path:
            assert path is None


class TestNotifyNowPlaying:
    """Tests for notify_now_playing."""

    def test_disabled(self) -> None:
        with patch("requests.get") as mock_get, patch("subprocess.run") as mock_run:
            assert notify_now_playing("T", "A", "B", "https://x", NotificationsConfig(enabled=False)) is False

        mock_get.assert_not_called()
        mock_run.assert_not_called()

    def test_no_download_without_notify_send(self) -> None:
        with patch("shutil.which", return_value=None), patch("requests.get") as mock_get:
            assert notify_now_playing("T", "A", "B", "https://x", NotificationsConfig()) is False

        mock_get.assert_not_called()

    def test_shows_notification_with_cover(self) -> None:
        response = make_response()
        response.content = b"img"
        config = NotificationsConfig(app_name="Test App")

        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("requests.get", return_value=response), \
                patch("subprocess.run", return_value=_completed()) as mock_run:
            assert notify_now_playing("Song", "A, B", "Album", "https://x/cover", config)

        cmd = mock_run.call_args.args[0]
        assert cmd[-2:] == ["Song", "A, B - Album"]
        assert cmd[cmd.index("--app-name") + 1] == "Test App"
        assert cmd[cmd.index("--category") + 1] == "music"
        assert "--icon" in cmd

    def test_cover_failure_still_notifies(self) -> None:
        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("requests.get", side_effect=requests.ConnectionError("offline")), \
                patch("subprocess.run", return_value=_completed()) as mock_run:
            assert notify_now_playing("Song", "A", "Album", "https://x/cover", NotificationsConfig())

        assert "--icon" not in mock_run.call_args.args[0]

    def test_falls_back_to_default_cover(self) -> None:
        config = NotificationsConfig()
        with patch("shutil.which", return_value="/usr/bin/notify-send"), \
                patch("requests.get", return_value=make_response()) as mock_get, \
                patch("subprocess.run", return_value=_completed()):
            mock_get.return_value.content = b"img"
            notify_now_playing("Song", "A", "Album", "", config)

        assert mock_get.call_args.args == (config.fallback_cover_url,)
