"""File operations for moving watched videos out of the library."""

import shutil
from pathlib import Path

from loguru import logger

from vidshelf.config.settings import WATCHED_DIRNAME
from vidshelf.filesystem.exceptions import (
    WatchedDirectoryMissingError,
    WatchedMoveError,
)
from vidshelf.models.video import VideoEntry


def watched_destination(location: Path) -> Path:
    """
    Compute where a watched video is moved to.

    Args:
        location: Current path of the video.

    Returns:
        ``<parent>/watched/<filename>``.
    """
    return location.parent / WATCHED_DIRNAME / location.name


def move_to_watched(video: VideoEntry, dry_run: bool = False) -> Path:
    """
    Move a video file into the watched directory next to it.

    The watched directory is never created here and an existing file
    at the destination is never overwritten.

    Args:
        video: Video to move.
        dry_run: If True, only simulate the operation.

    Returns:
        Destination path.

    Raises:
        WatchedDirectoryMissingError: If the watched directory is missing.
        WatchedMoveError: If the destination exists or the move fails.
    """
    destination = watched_destination(video.location)

    if not destination.parent.is_dir():
        raise WatchedDirectoryMissingError(destination.parent)

    if destination.exists():
        raise WatchedMoveError(f"Destination file exists: {destination}")

    if dry_run:
        logger.info(f'SIMULATION - Move: {video.filename} -> {destination}')
        return destination

    try:
        shutil.move(str(video.location), str(destination))
    except OSError as e:
        raise WatchedMoveError(f"Error moving {video.location}: {e}") from e

    logger.info(f'File moved: {destination}')
    return destination
