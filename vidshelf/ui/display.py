"""Table rendering for channel and video listings."""

from typing import List, Tuple

from rich.table import Table


def format_video_count(count: int) -> str:
    """
    Format a video count with the right plural.

    Args:
        count: Number of videos.

    Returns:
        e.g. "1 video" or "3 videos".
    """
    return f"{count} video" if count == 1 else f"{count} videos"


def channel_table(summary: List[Tuple[str, int]], search: str = "") -> Table:
    """
    Build the channel listing table.

    Args:
        summary: (channel name, video count) pairs, already sorted.
        search: Search term shown in the title.

    Returns:
        Rich Table with one row per channel.
    """
    title = f"Channels matching '{search}'" if search else "Channels"
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Channel", style="cyan")
    table.add_column("Videos", justify="right")
    for name, count in summary:
        table.add_row(name, str(count))
    return table


def video_table(channel: str, titles: List[str], search: str = "") -> Table:
    """Build the video listing table of one channel."""
    title = f"{channel} ({format_video_count(len(titles))})"
    if search:
        title += f" matching '{search}'"
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title")
    for index, video_title in enumerate(titles, 1):
        table.add_row(str(index), video_title)
    return table
