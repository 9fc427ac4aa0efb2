"""Exceptions raised by spotify-control commands."""

from typing import Optional


class SpotifyControlError(Exception):
    """Base exception for all command failures."""

    pass


class PlayerError(SpotifyControlError):
    """Base exception for failures talking to the media player."""

    def __init__(self, service_name: str, message: str):
        self.service_name = service_name
        super().__init__(message)


class PlayerUnavailableError(PlayerError):
    """Raised when the service is not reachable on the session bus."""

    def __init__(self, service_name: str, reason: Optional[str] = None):
        message = f"{service_name} is not available on the session bus"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(service_name, message)


class PlayerCommandError(PlayerError):
    """Raised when the player rejects a method call or property read."""

    def __init__(self, service_name: str, member: str, reason: Optional[str] = None):
        self.member = member
        message = f"{service_name} rejected {member}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(service_name, message)


class SearchError(SpotifyControlError):
    """Base exception for track search failures."""

    pass


class SearchUnavailableError(SearchError):
    """Raised when the search endpoint cannot be reached or answers garbage."""

    pass


class TrackNotFoundError(SearchError):
    """Raised when a search returns no tracks."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No track found for {query}")


class InvalidSelectionError(SpotifyControlError):
    """Raised when the answer at the track prompt is not a listed index."""

    pass
