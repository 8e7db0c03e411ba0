"""Tests for listing tables."""

import pytest

from vidshelf.ui.display import channel_table, format_video_count, video_table


class TestFormatVideoCount:
    """Tests for format_video_count function."""

    def test_singular(self):
        assert format_video_count(1) == "1 video"

    def test_plural(self):
        assert format_video_count(0) == "0 videos"
        assert format_video_count(3) == "3 videos"


class TestChannelTable:
    """Tests for channel_table function."""

    def test_one_row_per_channel(self):
        table = channel_table([("bar channel", 1), ("Foo", 3)])

        assert table.row_count == 2
        assert table.title == "Channels"

    def test_search_in_title(self):
        table = channel_table([("Foo", 3)], "baz")
        assert "baz" in table.title


class TestVideoTable:
    """Tests for video_table function."""

    def test_one_row_per_title(self):
        table = video_table("Foo", ["Bar.mp4", "Baz.mp4"])

        assert table.row_count == 2
        assert table.title == "Foo (2 videos)"

    def test_search_in_title(self):
        table = video_table("Foo", [], "zzz")
        assert table.title == "Foo (0 videos) matching 'zzz'"
