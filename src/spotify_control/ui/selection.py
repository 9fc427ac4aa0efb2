"""Terminal prompt for picking one track out of a search result list."""

from typing import Callable, List, Optional

from spotify_control.core.console import get_console
from spotify_control.domain.search import Track
from spotify_control.exceptions import InvalidSelectionError

PROMPT = "Enter a number to play: "


def show_candidates(tracks: List[Track]) -> None:
    """Print tracks as '<index> - <track>' lines, indexed from 0."""
    console = get_console()
    for i, track in enumerate(tracks):
        console.print(f"{i} - {track}", markup=False, highlight=False, soft_wrap=True)


def parse_selection(answer: str, count: int) -> int:
    """Turn the prompt answer into a list index.

    Raises:
        InvalidSelectionError: Not a number, or outside 0..count-1
    """
    answer = answer.strip()
    try:
        index = int(answer)
    except ValueError:
        raise InvalidSelectionError(f"{answer!r} is not a number") from None

    if not 0 <= index < count:
        raise InvalidSelectionError(f"{index} is not between 0 and {count - 1}")
    return index


def prompt_selection(
    tracks: List[Track], read: Optional[Callable[[str], str]] = None
) -> Track:
    """
    Show the candidates and ask the user to pick one.

    Args:
        tracks: Candidates, already trimmed to the display count
        read: Line reader, input() by default

    Returns:
        The chosen track

    Raises:
        InvalidSelectionError: Bad answer or end of input
    """
    read = read or input
    show_candidates(tracks)
    try:
        answer = read(PROMPT)
    except EOFError:
        raise InvalidSelectionError("No selection made") from None
    return tracks[parse_selection(answer, len(tracks))]
