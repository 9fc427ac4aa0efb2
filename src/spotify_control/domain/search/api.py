"""
Track search operations.

Resolves a free-text query into tracks using the search endpoint.
Every call issues a fresh request; nothing is cached.
"""

from typing import List, Optional

import requests
from loguru import logger

from spotify_control.core.config import SearchConfig
from spotify_control.exceptions import SearchUnavailableError, TrackNotFoundError

from .models import Track


def search_tracks(query: str, config: Optional[SearchConfig] = None) -> List[Track]:
    """Search for tracks matching a query.

    Args:
        query: Free-text query, best results with "title artist"
        config: Search settings (endpoint URL, timeout)

    Returns:
        Tracks in the order the endpoint ranked them

    Raises:
        SearchUnavailableError: Network failure, error status or malformed response
        TrackNotFoundError: The endpoint returned no tracks
    """
    config = config or SearchConfig()

    try:
        response = requests.get(
            config.url, params={"track": query}, timeout=config.timeout
        )
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        logger.error(f"Search request failed for {query!r}: {e}")
        raise SearchUnavailableError(f"Search service unavailable: {e}") from e
    except ValueError as e:
        logger.error(f"Search returned invalid JSON for {query!r}: {e}")
        raise SearchUnavailableError("Search service returned an invalid response") from e

    try:
        items = data["tracks"]["items"]
        tracks = [Track.from_api(item) for item in items]
    except (KeyError, TypeError, AttributeError) as e:
        logger.error(f"Unexpected search response shape for {query!r}: {e}")
        raise SearchUnavailableError("Search service returned an invalid response") from e

    logger.info(f"Search found {len(tracks)} results for: {query}")

    if not tracks:
        raise TrackNotFoundError(query)

    return tracks
