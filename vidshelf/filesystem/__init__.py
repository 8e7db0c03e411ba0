"""Filesystem operations: library scanning and watched moves."""

from vidshelf.filesystem.exceptions import (
    LibraryError,
    ScanError,
    VideoNotFoundError,
    WatchedMoveError,
    WatchedDirectoryMissingError,
)
from vidshelf.filesystem.indexer import (
    parse_filename,
    scan,
)
from vidshelf.filesystem.file_ops import (
    watched_destination,
    move_to_watched,
)

__all__ = [
    "LibraryError",
    "ScanError",
    "VideoNotFoundError",
    "WatchedMoveError",
    "WatchedDirectoryMissingError",
    "parse_filename",
    "scan",
    "watched_destination",
    "move_to_watched",
]
