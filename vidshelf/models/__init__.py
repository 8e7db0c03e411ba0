"""Data models for the video library."""

from vidshelf.models.video import VideoEntry, Channel
from vidshelf.models.catalog import Catalog

__all__ = ["VideoEntry", "Channel", "Catalog"]
