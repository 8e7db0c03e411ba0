"""Video and channel data models for the vidshelf package."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class VideoEntry:
    """
    A single video file of the library.

    Two entries are equal when both title and location match, but
    ordering only looks at the location so that videos are presented
    in on-disk name order.

    Attributes:
        title: Human readable name taken from the filename.
        location: Full path of the backing file.
    """

    title: str
    location: Path

    def __lt__(self, other: "VideoEntry") -> bool:
        if not isinstance(other, VideoEntry):
            return NotImplemented
        return self.location < other.location

    @property
    def filename(self) -> str:
        """Name of the backing file."""
        return self.location.name


@dataclass
class Channel:
    """
    Videos sharing a filename prefix.

    Attributes:
        name: Parsed filename prefix, unique within a catalog.
        videos: Entries sorted by location once a scan completes.
    """

    name: str
    videos: List[VideoEntry] = field(default_factory=list)

    def sort_videos(self) -> None:
        """Sort videos by location."""
        self.videos.sort(key=lambda video: video.location)

    def matches(self, search: str) -> bool:
        """Check if the channel name contains an already lowercased term."""
        return search in self.name.lower()

    def __len__(self) -> int:
        return len(self.videos)
