"""Library scanning: builds a catalog from a flat directory of videos."""

import stat
from pathlib import Path
from typing import Optional, Tuple, Union

from loguru import logger

from vidshelf.config.settings import (
    CHANNEL_DELIMITER,
    HIDDEN_PREFIX,
    SEPARATOR_LENGTH,
)
from vidshelf.filesystem.exceptions import ScanError
from vidshelf.models.catalog import Catalog
from vidshelf.models.video import VideoEntry


def parse_filename(filename: str) -> Optional[Tuple[str, str]]:
    """
    Split a filename into channel and title.

    ``Foo__1Bar.mp4`` gives ``("Foo", "Bar.mp4")``: the text before the
    first ``__`` is the channel, and the delimiter plus one separator
    character are dropped.

    Args:
        filename: Bare filename, without directory.

    Returns:
        (channel, title) tuple, or None for hidden files, names without
        delimiter and names too short to hold the separator character.
    """
    if filename.startswith(HIDDEN_PREFIX):
        return None

    index = filename.find(CHANNEL_DELIMITER)
    if index == -1:
        return None

    if len(filename) < index + SEPARATOR_LENGTH:
        return None

    return filename[:index], filename[index + SEPARATOR_LENGTH:]


def _is_regular_file(path: Path) -> bool:
    try:
        mode = path.lstat().st_mode
    except OSError as e:
        raise ScanError(f"Cannot read {path}: {e}") from e
    return stat.S_ISREG(mode)


def scan(root: Union[str, Path]) -> Catalog:
    """
    Build a catalog from the direct children of a directory.

    Subdirectories (including ``watched``) and symlinks are skipped,
    never recursed into. Videos of each channel end up sorted by path.

    Args:
        root: Library directory.

    Returns:
        A new Catalog.

    Raises:
        ScanError: If the directory or any of its entries cannot be read.
    """
    root = Path(root)
    logger.debug(f"Scanning: {root}")

    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise ScanError(f"Cannot read library directory {root}: {e}") from e

    catalog = Catalog()
    skipped = 0
    for path in entries:
        if not _is_regular_file(path):
            continue

        parsed = parse_filename(path.name)
        if parsed is None:
            skipped += 1
            logger.debug(f"Ignored: {path.name}")
            continue

        channel, title = parsed
        catalog.add_video(channel, VideoEntry(title=title, location=path))

    catalog.sort_videos()
    logger.info(
        f"{catalog.video_count()} videos in {len(catalog)} channels "
        f"({skipped} files ignored) in {root}"
    )
    return catalog
