"""IPC (Inter-Process Communication) for spotify-control.

Talks to MPRIS media players over the D-Bus session bus.
"""

from .client import get_metadata, get_property, send_command

__all__ = ['get_metadata', 'get_property', 'send_command']
