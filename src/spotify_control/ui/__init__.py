"""Terminal interaction helpers."""

from .selection import parse_selection, prompt_selection, show_candidates

__all__ = ["parse_selection", "prompt_selection", "show_candidates"]
