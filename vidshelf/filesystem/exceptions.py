"""Exceptions raised by library scanning and watched-state changes."""


class LibraryError(Exception):
    """Base class for every video library error."""

    pass


class ScanError(LibraryError):
    """The library directory or one of its entries could not be read."""

    pass


class VideoNotFoundError(LibraryError):
    """No video with the requested title exists in the channel."""

    def __init__(self, channel: str, title: str) -> None:
        super().__init__(f"No video '{title}' in channel '{channel}'")
        self.channel = channel
        self.title = title


class WatchedMoveError(LibraryError):
    """Moving a video into its watched directory failed."""

    pass


class WatchedDirectoryMissingError(WatchedMoveError):
    """The watched directory does not exist next to the video."""

    def __init__(self, directory) -> None:
        super().__init__(f"Watched directory {directory} does not exist")
        self.directory = directory
