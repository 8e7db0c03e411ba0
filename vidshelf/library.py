"""Library session tying scans, queries and watched moves together."""

from pathlib import Path
from typing import Union

from loguru import logger

from vidshelf.filesystem.exceptions import VideoNotFoundError
from vidshelf.filesystem.file_ops import move_to_watched
from vidshelf.filesystem.indexer import scan
from vidshelf.models.catalog import Catalog
from vidshelf.models.video import VideoEntry


class Library:
    """
    A library directory and its most recent catalog.

    The catalog is a snapshot: it is rebuilt wholesale by ``reload`` and
    only changed in place when a video is marked as watched.

    Attributes:
        root: Library directory.
        catalog: Catalog from the last scan.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)
        self.catalog: Catalog = scan(self.root)

    def reload(self) -> Catalog:
        """Rescan the library directory and replace the catalog."""
        self.catalog = scan(self.root)
        return self.catalog

    def resolve(self, channel: str, title: str) -> VideoEntry:
        """
        Look up a video that must exist.

        Raises:
            VideoNotFoundError: If the channel or title is unknown.
        """
        video = self.catalog.get_video(channel, title)
        if video is None:
            raise VideoNotFoundError(channel, title)
        return video

    def mark_watched(
        self,
        channel: str,
        title: str,
        dry_run: bool = False,
        rescan: bool = True,
    ) -> Path:
        """
        Move a video into ``watched/`` and drop it from the catalog.

        The catalog is only changed once the file has been moved, so a
        failed move leaves it untouched.

        Args:
            channel: Channel name.
            title: Exact video title.
            dry_run: If True, simulate the move and keep the catalog.
            rescan: If True, rebuild the catalog after the move.

        Returns:
            Destination path of the file.

        Raises:
            VideoNotFoundError: If the video is not in the catalog.
            WatchedMoveError: If the file could not be moved.
        """
        video = self.resolve(channel, title)
        destination = move_to_watched(video, dry_run=dry_run)
        if dry_run:
            return destination

        self.catalog.remove_video(channel, title)
        logger.info(f"Marked watched: {channel} / {title}")

        if rescan:
            self.reload()
        return destination
