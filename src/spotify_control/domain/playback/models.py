"""Now-playing state read from the player."""

from typing import Any, Dict, NamedTuple, Tuple

UNKNOWN = "Unknown"


class NowPlaying(NamedTuple):
    """Immutable snapshot of the player's current track."""

    title: str = UNKNOWN
    artists: Tuple[str, ...] = (UNKNOWN,)
    album: str = UNKNOWN
    art_url: str = ""

    @classmethod
    def from_metadata(cls, metadata: Dict[str, Any], fallback_art_url: str = "") -> "NowPlaying":
        """Build from an MPRIS Metadata map, filling gaps with defaults."""
        artists = metadata.get("xesam:artist")
        if isinstance(artists, str):
            artists = [artists]

        return cls(
            title=metadata.get("xesam:title") or UNKNOWN,
            artists=tuple(artists) if artists else (UNKNOWN,),
            album=metadata.get("xesam:album") or UNKNOWN,
            art_url=metadata.get("mpris:artUrl") or fallback_art_url,
        )

    @property
    def artist_line(self) -> str:
        return ", ".join(self.artists)

    def __str__(self) -> str:
        return f"{self.title} - {self.artist_line} - {self.album}"
