"""MPRIS client for sending commands to a running media player over D-Bus."""

from typing import Any, Dict, Optional, Sequence

from loguru import logger

from spotify_control.core.config import PlayerConfig
from spotify_control.exceptions import PlayerCommandError, PlayerUnavailableError

PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"


def get_session_bus() -> Any:
    """
    Connect to the D-Bus session bus.

    Returns:
        pydbus SessionBus instance
    """
    from pydbus import SessionBus

    return SessionBus()


def get_player(service_name: str, config: PlayerConfig) -> Any:
    """
    Get a proxy for the player interface exposed by a service.

    Args:
        service_name: Bus name of the media player (e.g., 'org.mpris.MediaPlayer2.spotify')
        config: Player settings (object path, call timeout)

    Returns:
        Proxy for org.mpris.MediaPlayer2.Player

    Raises:
        PlayerUnavailableError: No session bus, name not owned, or no player interface
    """
    try:
        bus = get_session_bus()
        proxy = bus.get(service_name, config.object_path, timeout=config.timeout)
        return proxy[PLAYER_INTERFACE]
    except Exception as e:
        logger.warning(f"Could not connect to {service_name}: {e}")
        raise PlayerUnavailableError(service_name, str(e)) from e


def send_command(
    service_name: str,
    command: str,
    args: Sequence[Any] = (),
    config: Optional[PlayerConfig] = None,
) -> None:
    """
    Call a method on the player interface, ignoring its return value.

    Args:
        service_name: Bus name of the media player
        command: Method name (e.g., 'PlayPause', 'Next', 'OpenUri')
        args: Method arguments, passed through unchanged
        config: Player settings (defaults used when omitted)

    Raises:
        PlayerUnavailableError: The player could not be reached
        PlayerCommandError: The player rejected the call
    """
    config = config or PlayerConfig()
    player = get_player(service_name, config)

    logger.info(f"Calling {PLAYER_INTERFACE}.{command}{tuple(args)!r} on {service_name}")
    try:
        method = getattr(player, command)
        method(*args, timeout=config.timeout)
    except Exception as e:
        logger.error(f"{command} failed on {service_name}: {e}")
        raise PlayerCommandError(service_name, command, str(e)) from e


def get_property(service_name: str, name: str, config: Optional[PlayerConfig] = None) -> Any:
    """
    Read a property from the player interface.

    Raises:
        PlayerUnavailableError: The player could not be reached
        PlayerCommandError: The property could not be read
    """
    config = config or PlayerConfig()
    player = get_player(service_name, config)

    logger.debug(f"Reading {PLAYER_INTERFACE}.{name} from {service_name}")
    try:
        return getattr(player, name)
    except Exception as e:
        logger.error(f"Reading {name} failed on {service_name}: {e}")
        raise PlayerCommandError(service_name, name, str(e)) from e


def get_metadata(service_name: str, config: Optional[PlayerConfig] = None) -> Dict[str, Any]:
    """Read the current track's MPRIS metadata map."""
    metadata = get_property(service_name, "Metadata", config)
    return dict(metadata or {})
