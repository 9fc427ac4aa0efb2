"""
Playback actions for spotify-control.

Each action issues exactly one remote operation against the player
(plus one search request for play-song search).
"""

from typing import Callable, List, Optional

from loguru import logger

from spotify_control import ipc
from spotify_control.core.config import Config
from spotify_control.core.output import log
from spotify_control.domain.search import Track, search_tracks
from spotify_control.notifications import notify_now_playing
from spotify_control.ui import prompt_selection

from .models import NowPlaying

# CLI subcommand -> org.mpris.MediaPlayer2.Player method
CONTROL_COMMANDS = {
    "play-pause": "PlayPause",
    "next": "Next",
    "previous": "Previous",
}


def send_control(service_name: str, action: str, config: Config) -> None:
    """Send a PlayPause/Next/Previous call for a CLI subcommand."""
    try:
        command = CONTROL_COMMANDS[action]
    except KeyError:
        raise ValueError(f"Unknown control action: {action}") from None

    ipc.send_command(service_name, command, config=config.player)


def now_playing(service_name: str, config: Config) -> NowPlaying:
    """Read the current track, print it and show a desktop notification."""
    metadata = ipc.get_metadata(service_name, config.player)
    current = NowPlaying.from_metadata(
        metadata, fallback_art_url=config.notifications.fallback_cover_url
    )

    log(str(current))
    notify_now_playing(
        current.title,
        current.artist_line,
        current.album,
        current.art_url,
        config.notifications,
    )
    return current


def play_uri(service_name: str, uri: str, config: Config) -> None:
    """Open a track URI on the player exactly as given."""
    ipc.send_command(service_name, "OpenUri", [uri], config=config.player)


def play_search(
    service_name: str,
    query: str,
    config: Config,
    list_mode: bool = False,
    count: Optional[int] = None,
    choose: Optional[Callable[[List[Track]], Track]] = None,
) -> Track:
    """
    Search for a track and open it on the player.

    Args:
        service_name: Bus name of the media player
        query: Free-text query
        config: Application configuration
        list_mode: Let the user pick from the results instead of taking the first
        count: Number of results to offer in list mode (default from config)
        choose: Picker used in list mode (terminal prompt by default)

    Returns:
        The track that was opened

    Raises:
        TrackNotFoundError: No results for the query
        SearchUnavailableError: The search endpoint failed
        InvalidSelectionError: Bad answer at the prompt
    """
    tracks = search_tracks(query, config.search)

    if list_mode:
        count = count or config.search.default_count
        choose = choose or prompt_selection
        track = choose(tracks[:count])
    else:
        track = tracks[0]

    logger.debug(f"Resolved {query!r} to {track.uri}")
    log(f"Playing {track}")
    play_uri(service_name, track.uri, config)
    return track
