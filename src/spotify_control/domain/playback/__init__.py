"""Playback domain - control a running MPRIS player."""

from .actions import (
    CONTROL_COMMANDS,
    now_playing,
    play_search,
    play_uri,
    send_control,
)
from .models import NowPlaying

__all__ = [
    "CONTROL_COMMANDS",
    "NowPlaying",
    "now_playing",
    "play_search",
    "play_uri",
    "send_control",
]
