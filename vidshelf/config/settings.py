"""Configuration settings and constants for the vidshelf package."""

from typing import Dict, List

# Filename convention: <channel>__<separator char><title>
CHANNEL_DELIMITER: str = "__"
SEPARATOR_LENGTH: int = len(CHANNEL_DELIMITER) + 1
HIDDEN_PREFIX: str = "."

# Subdirectory receiving watched videos (never scanned)
WATCHED_DIRNAME: str = "watched"

# Players tried in order when none is configured
VIDEO_PLAYERS: Dict[str, List[str]] = {
    'linux': ['mpv', 'vlc', 'mplayer', 'xdg-open'],
    'darwin': ['mpv', 'vlc', 'open'],
    'windows': ['mpv', 'vlc'],
}

# Environment variables providing defaults for the CLI
LIBRARY_ENV_VAR: str = "VIDSHELF_LIBRARY"
PLAYER_ENV_VAR: str = "VIDSHELF_PLAYER"

LOG_FILENAME: str = "vidshelf.log"
