"""External video player launching."""

import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from vidshelf.config.settings import VIDEO_PLAYERS


def candidate_players() -> List[str]:
    """Return the players to try on the current platform, in order."""
    if sys.platform.startswith('linux'):
        return VIDEO_PLAYERS['linux']
    elif sys.platform == 'darwin':
        return VIDEO_PLAYERS['darwin']
    elif sys.platform.startswith('win'):
        return VIDEO_PLAYERS['windows']
    return VIDEO_PLAYERS['linux']


def find_player() -> Optional[str]:
    """Return the first installed player, or None."""
    for player in candidate_players():
        if shutil.which(player):
            return player
    return None


def launch_video_player(video_path: Path, player: Optional[str] = None) -> bool:
    """
    Start a player on a video file without waiting for it.

    Args:
        video_path: File to play.
        player: Player command; the first installed known player if None.

    Returns:
        True if the process was spawned, False otherwise.
    """
    if not player:
        player = find_player()
        if player is None:
            logger.error(f"No video player found among {candidate_players()}")
            return False

    try:
        subprocess.Popen(
            [player, str(video_path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.error(f"Error launching {player}: {e}")
        return False

    logger.info(f"Launched {player} on {video_path}")
    return True
