"""User interface components."""

from vidshelf.ui.console import ConsoleUI
from vidshelf.ui.display import (
    format_video_count,
    channel_table,
    video_table,
)
from vidshelf.ui.player import (
    candidate_players,
    find_player,
    launch_video_player,
)

__all__ = [
    "ConsoleUI",
    "format_video_count",
    "channel_table",
    "video_table",
    "candidate_players",
    "find_player",
    "launch_video_player",
]
