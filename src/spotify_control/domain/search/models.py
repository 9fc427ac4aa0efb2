"""Track model returned by the search endpoint."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

TRACK_URI_PREFIX = "spotify:track:"


def format_artists(artists: List[str]) -> str:
    """Join artist names as 'A', 'A and B' or 'A, B and C'."""
    if not artists:
        return "Unknown"
    if len(artists) == 1:
        return artists[0]
    return f"{', '.join(artists[:-1])} and {artists[-1]}"


@dataclass(frozen=True)
class Track:
    """A single search result."""

    id: str
    name: str
    artists: List[str] = field(default_factory=list)
    album: str = ""

    @property
    def uri(self) -> str:
        """Playable URI for OpenUri."""
        return f"{TRACK_URI_PREFIX}{self.id}"

    def __str__(self) -> str:
        return f"{self.name} by {format_artists(self.artists)} on {self.album}"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Track":
        """Build a Track from one item of the search response.

        Raises:
            KeyError: If the item has no id or name
        """
        return cls(
            id=data["id"],
            name=data["name"].strip(),
            artists=[a["name"] for a in data.get("artists", []) if a.get("name")],
            album=(data.get("album") or {}).get("name", ""),
        )
