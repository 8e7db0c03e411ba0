"""Command-line interface argument parsing."""

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

from vidshelf.config.settings import LIBRARY_ENV_VAR, LOG_FILENAME, PLAYER_ENV_VAR

COMMANDS = ('channels', 'videos', 'play', 'watch')


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        command: Subcommand to run.
        library_dir: Library directory to scan.
        player: Player command, None to auto-detect.
        channel: Selected channel name.
        title: Selected video title.
        search: Search term for listings.
        dry_run: If True, simulate the watched move.
        debug: If True, enable debug logging.
        log_file: Optional log file path.
    """

    command: str = 'channels'
    library_dir: Optional[Path] = None
    player: Optional[str] = None
    channel: str = ""
    title: str = ""
    search: str = ""
    dry_run: bool = False
    debug: bool = False
    log_file: Optional[Path] = None


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Defaults for the library directory and the player are read from
    the environment when the parser is built.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='vidshelf',
        description="""
        Browses a directory of videos named <channel>__<n><title>,
        grouped by channel.
        """
    )

    parser.add_argument(
        '-l', '--library',
        default=os.environ.get(LIBRARY_ENV_VAR, '.'),
        help=f"library directory (default: ${LIBRARY_ENV_VAR} or current directory)"
    )

    parser.add_argument(
        '-p', '--player',
        default=os.environ.get(PLAYER_ENV_VAR),
        help=f"video player command (default: ${PLAYER_ENV_VAR} or auto-detect)"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '--log-file',
        default=None,
        metavar='PATH',
        help=f"also write logs to this file (e.g. {LOG_FILENAME})"
    )

    subparsers = parser.add_subparsers(dest='command')

    channels = subparsers.add_parser('channels', help="list channels")
    channels.add_argument('search', nargs='?', default='', help="search term")

    videos = subparsers.add_parser('videos', help="list the videos of a channel")
    videos.add_argument('channel', help="channel name")
    videos.add_argument('search', nargs='?', default='', help="search term")

    play = subparsers.add_parser('play', help="open a video in the player")
    play.add_argument('channel', help="channel name")
    play.add_argument('title', help="exact video title")

    watch = subparsers.add_parser('watch', help="move a video to watched/")
    watch.add_argument('channel', help="channel name")
    watch.add_argument('title', help="exact video title")
    watch.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - no file modifications"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def validate_library_dir(library_dir: Path) -> bool:
    """
    Check that the library directory exists and is a directory.

    Args:
        library_dir: Library directory.

    Returns:
        True if usable, False otherwise.
    """
    if not library_dir.exists():
        logger.error(f"Library directory {library_dir} does not exist")
        return False
    if not library_dir.is_dir():
        logger.error(f"Library path {library_dir} is not a directory")
        return False
    return True


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        command=namespace.command or 'channels',
        library_dir=Path(namespace.library).expanduser(),
        player=namespace.player or None,
        channel=getattr(namespace, 'channel', ''),
        title=getattr(namespace, 'title', ''),
        search=getattr(namespace, 'search', ''),
        dry_run=getattr(namespace, 'dry_run', False),
        debug=namespace.debug,
        log_file=Path(namespace.log_file) if namespace.log_file else None,
    )
