"""
spotify-control CLI - Entry point

Parses one command, sends it to the media player over D-Bus and exits.
"""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from loguru import logger

from spotify_control.core.config import Config, load_config
from spotify_control.core.output import log_error, setup_from_config
from spotify_control.domain import playback
from spotify_control.exceptions import SpotifyControlError


def _package_version() -> str:
    try:
        return version("spotify-control")
    except PackageNotFoundError:
        return "unknown"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1, got {number}")
    return number


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Create the argument parser, using config values as defaults."""
    parser = argparse.ArgumentParser(
        prog="spotify-control",
        description="Control Spotify (or any MPRIS player) over D-Bus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global options
    parser.add_argument(
        '-s', '--service-name',
        default=config.player.service_name,
        help=(
            'D-Bus service the commands are sent to (default: %(default)s). '
            'Search results are Spotify URIs, so play-song search may not work '
            'with other players'
        ),
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Also write log output to stderr',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {_package_version()}',
    )

    subparsers = parser.add_subparsers(dest='subcommand', metavar='COMMAND', required=True)

    # Player controls
    subparsers.add_parser('play-pause', help='Play/Pause the current song')
    subparsers.add_parser('next', help='Play the next song')
    subparsers.add_parser('previous', help='Play the previous song')
    subparsers.add_parser('now-playing', help='Show a notification with the current song')

    # Play a specific song
    play_parser = subparsers.add_parser('play-song', help='Play a song')
    modes = play_parser.add_subparsers(dest='mode', metavar='MODE', required=True)

    uri_parser = modes.add_parser('uri', help='Play a track URI')
    uri_parser.add_argument('uri', help='A URI in the format of spotify:track:<id>')

    search_parser = modes.add_parser('search', help='Search for a song and play it')
    search_parser.add_argument(
        'query',
        nargs='+',
        help='Search terms, best results with "title artist"',
    )
    search_parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='Pick from a list of songs instead of starting the first',
    )
    search_parser.add_argument(
        '-c', '--count',
        type=_positive_int,
        default=config.search.default_count,
        help='Number of songs to list with --list (default: %(default)s)',
    )

    return parser


def dispatch(args: argparse.Namespace, config: Config) -> None:
    """Run the command selected on the command line."""
    service_name = args.service_name

    if args.subcommand in playback.CONTROL_COMMANDS:
        playback.send_control(service_name, args.subcommand, config)

    elif args.subcommand == 'now-playing':
        playback.now_playing(service_name, config)

    elif args.subcommand == 'play-song':
        if args.mode == 'uri':
            playback.play_uri(service_name, args.uri, config)
        else:
            playback.play_search(
                service_name,
                ' '.join(args.query),
                config,
                list_mode=args.list,
                count=args.count,
            )


def run(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and run one command.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure, 130 if interrupted)
    """
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    setup_from_config(config, verbose=args.verbose)
    logger.info(f"Running {args.subcommand} against {args.service_name}")

    try:
        dispatch(args, config)
    except SpotifyControlError as e:
        log_error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    return 0


def main() -> None:
    """Main entry point for the spotify-control command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
