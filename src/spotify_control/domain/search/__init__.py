"""Search domain - resolve free text to playable tracks."""

from .api import search_tracks
from .models import TRACK_URI_PREFIX, Track, format_artists

__all__ = ["search_tracks", "Track", "TRACK_URI_PREFIX", "format_artists"]
