"""In-memory catalog of channels and the queries run against it."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from loguru import logger

from vidshelf.models.video import Channel, VideoEntry


@dataclass
class Catalog:
    """
    Snapshot of the library produced by one scan.

    Map order of ``channels`` is never used for presentation: every
    listing is explicitly sorted. Searches are case-insensitive
    substring matches and an empty search term matches everything.
    Missing channels or titles give empty results instead of errors.

    Attributes:
        channels: Channels keyed by name.
    """

    channels: Dict[str, Channel] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.channels)

    def __contains__(self, name: object) -> bool:
        return name in self.channels

    def __iter__(self) -> Iterator[Channel]:
        return iter(self.channels.values())

    def add_video(self, channel_name: str, video: VideoEntry) -> Channel:
        """
        Append a video to a channel, creating the channel if needed.

        Args:
            channel_name: Name of the channel.
            video: Entry to append.

        Returns:
            The channel the video was added to.
        """
        channel = self.channels.get(channel_name)
        if channel is None:
            channel = Channel(name=channel_name)
            self.channels[channel_name] = channel
        channel.videos.append(video)
        return channel

    def sort_videos(self) -> None:
        """Sort the videos of every channel by location."""
        for channel in self.channels.values():
            channel.sort_videos()

    def video_count(self) -> int:
        """Total number of videos across channels."""
        return sum(len(channel) for channel in self.channels.values())

    def _matching_channels(self, search: str) -> List[Channel]:
        term = search.lower()
        matching = []
        for channel in self.channels.values():
            if channel.matches(term) or any(
                term in video.title.lower() for video in channel.videos
            ):
                matching.append(channel)
        return sorted(matching, key=lambda c: (c.name.lower(), c.name))

    def channel_list(self, search: str = "") -> List[str]:
        """
        List channels whose name or any video title contains ``search``.

        Args:
            search: Case-insensitive search term.

        Returns:
            Channel names sorted case-insensitively, without duplicates.
        """
        return [channel.name for channel in self._matching_channels(search)]

    def channel_summary(self, search: str = "") -> List[Tuple[str, int]]:
        """Same selection as channel_list, paired with each video count."""
        return [
            (channel.name, len(channel))
            for channel in self._matching_channels(search)
        ]

    def list_videos(self, channel: str, search: str = "") -> List[str]:
        """
        List titles of a channel matching ``search``.

        A match on the channel name selects every video of the channel.

        Args:
            channel: Channel name.
            search: Case-insensitive search term.

        Returns:
            Titles sorted case-insensitively, or an empty list for an
            unknown channel.
        """
        entry = self.channels.get(channel)
        if entry is None:
            return []

        term = search.lower()
        if entry.matches(term):
            selected = list(entry.videos)
        else:
            selected = [v for v in entry.videos if term in v.title.lower()]

        selected.sort(key=lambda v: (v.title.lower(), v.location))
        return [video.title for video in selected]

    def get_videos(self, channel: str, title: str) -> List[VideoEntry]:
        """Return every video of a channel with exactly this title."""
        entry = self.channels.get(channel)
        if entry is None:
            return []
        return [video for video in entry.videos if video.title == title]

    def get_video(self, channel: str, title: str) -> Optional[VideoEntry]:
        """
        Find a video by exact title.

        Args:
            channel: Channel name.
            title: Exact, case-sensitive title.

        Returns:
            First matching entry in location order, or None.
        """
        videos = self.get_videos(channel, title)
        if len(videos) > 1:
            logger.debug(f"{len(videos)} videos titled '{title}' in {channel}, using first")
        return videos[0] if videos else None

    def remove_video(self, channel: str, title: str) -> Optional[VideoEntry]:
        """
        Remove the first video with this exact title from a channel.

        The channel itself is kept even when it becomes empty.

        Args:
            channel: Channel name.
            title: Exact, case-sensitive title.

        Returns:
            The removed entry, or None if nothing matched.
        """
        video = self.get_video(channel, title)
        if video is None:
            return None
        self.channels[channel].videos.remove(video)
        logger.debug(f"Removed {video.location} from {channel}")
        return video
