"""Entry point for the vidshelf package.

Run with: python -m vidshelf [--library DIR] COMMAND ...
"""

import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from vidshelf.config import (
    CLIArgs,
    parse_arguments,
    args_to_cli_args,
    validate_library_dir,
)
from vidshelf.filesystem import LibraryError
from vidshelf.library import Library
from vidshelf.ui import (
    ConsoleUI,
    channel_table,
    video_table,
    launch_video_player,
)


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
        log_file: Optional file receiving every debug message.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    if log_file:
        logger.add(
            str(log_file),
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


def show_channels(library: Library, cli_args: CLIArgs, console: ConsoleUI) -> int:
    summary = library.catalog.channel_summary(cli_args.search)
    if not summary:
        console.print_warning("No matching channel")
        return 0
    console.print_table(channel_table(summary, cli_args.search))
    return 0


def show_videos(library: Library, cli_args: CLIArgs, console: ConsoleUI) -> int:
    if cli_args.channel not in library.catalog:
        console.print_warning(f"Unknown channel: {cli_args.channel}")
        return 0
    titles = library.catalog.list_videos(cli_args.channel, cli_args.search)
    console.print_table(video_table(cli_args.channel, titles, cli_args.search))
    return 0


def play_video(library: Library, cli_args: CLIArgs, console: ConsoleUI) -> int:
    video = library.resolve(cli_args.channel, cli_args.title)
    if not launch_video_player(video.location, cli_args.player):
        console.print_error(f"Could not launch a player for {video.filename}")
        return 1
    console.print_success(f"Playing {video.title}")
    return 0


def watch_video(library: Library, cli_args: CLIArgs, console: ConsoleUI) -> int:
    destination = library.mark_watched(
        cli_args.channel, cli_args.title, dry_run=cli_args.dry_run
    )
    if cli_args.dry_run:
        console.print_simulation(f"{cli_args.title} -> {destination}")
        return 0

    remaining = len(library.catalog.list_videos(cli_args.channel))
    console.print_success(
        f"{cli_args.title} moved to {destination} ({remaining} left in {cli_args.channel})"
    )
    return 0


COMMAND_HANDLERS = {
    'channels': show_channels,
    'videos': show_videos,
    'play': play_video,
    'watch': watch_video,
}


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the video library browser.

    Args:
        args: Argument list (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    load_dotenv()
    namespace = parse_arguments(args)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug, cli_args.log_file)
    console = ConsoleUI()

    if not validate_library_dir(cli_args.library_dir):
        console.print_error(f"Invalid library directory: {cli_args.library_dir}")
        return 1

    if cli_args.dry_run:
        console.print_info("Simulation mode: no file will be moved")

    handler = COMMAND_HANDLERS[cli_args.command]
    try:
        library = Library(cli_args.library_dir)
        return handler(library, cli_args, console)
    except LibraryError as e:
        logger.debug(f"{cli_args.command} failed: {e!r}")
        console.print_error(str(e))
        return 1


def run() -> None:
    """Console script wrapper around main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()
