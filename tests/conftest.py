"""Shared fixtures: isolated config/data dirs and a fake D-Bus session bus."""

import pytest
from loguru import logger

from fakes import FakeBus
from spotify_control.core.config import DEFAULT_SERVICE_NAME


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point XDG dirs at tmp_path and clear environment overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for name in (
        "SPOTIFY_CONTROL_SERVICE_NAME",
        "SPOTIFY_CONTROL_SEARCH_URL",
        "SPOTIFY_CONTROL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    # Release file sinks added by setup_loguru
    logger.remove()


@pytest.fixture
def fake_bus(monkeypatch) -> FakeBus:
    """Fake session bus with the default Spotify service registered."""
    bus = FakeBus()
    bus.add_player(DEFAULT_SERVICE_NAME)
    monkeypatch.setattr("spotify_control.ipc.client.get_session_bus", lambda: bus)
    return bus
