"""Tests for library scanning."""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

from vidshelf.filesystem.exceptions import ScanError
from vidshelf.filesystem.indexer import parse_filename, scan


class TestParseFilename:
    """Tests for parse_filename function."""

    def test_splits_channel_and_title(self):
        """Splits at the delimiter and drops the separator character."""
        assert parse_filename("Foo__1Bar.mp4") == ("Foo", "Bar.mp4")

    def test_uses_first_delimiter(self):
        """Only the first __ separates channel from title."""
        assert parse_filename("Foo__1Bar__2Baz.mp4") == ("Foo", "Bar__2Baz.mp4")

    def test_keeps_raw_channel_name(self):
        """Channel name is not trimmed."""
        assert parse_filename("My Show __1Ep.mkv") == ("My Show ", "Ep.mkv")

    def test_returns_none_without_delimiter(self):
        """Names without __ cannot be attributed to a channel."""
        assert parse_filename("NoDelim.mp4") is None
        assert parse_filename("single_underscore_1.mp4") is None

    def test_returns_none_for_hidden_files(self):
        """Hidden files are ignored even with a delimiter."""
        assert parse_filename(".hidden__1x.mp4") is None

    def test_returns_none_for_truncated_separator(self):
        """Names ending inside the separator are ignored."""
        assert parse_filename("Foo__") is None

    def test_empty_title_after_separator(self):
        """A name ending right after the separator has an empty title."""
        assert parse_filename("Foo__1") == ("Foo", "")

    def test_triple_underscore(self):
        """The third underscore is the separator character."""
        assert parse_filename("Foo___Bar.mp4") == ("Foo", "Bar.mp4")


class TestScan:
    """Tests for scan function."""

    def test_groups_videos_by_channel(self, library_dir):
        """Builds one channel per filename prefix."""
        catalog = scan(library_dir)

        assert sorted(catalog.channels) == ["Cooking", "Foo", "cooking"]
        assert [v.title for v in catalog.channels["Foo"].videos] == ["Bar.mp4", "Baz.mp4"]

    def test_locations_are_full_paths(self, library_dir):
        """Video locations point at the scanned files."""
        catalog = scan(library_dir)

        video = catalog.channels["Foo"].videos[0]
        assert video.location == library_dir / "Foo__1Bar.mp4"
        assert video.location.exists()

    def test_excludes_hidden_and_undelimited_files(self, library_dir):
        """Hidden and delimiter-less files are in no channel."""
        catalog = scan(library_dir)

        locations = {v.location.name for channel in catalog for v in channel.videos}
        assert ".hidden__1x.mp4" not in locations
        assert "NoDelim.mp4" not in locations
        assert "" not in catalog.channels

    def test_exclusion_is_stable_across_scans(self, library_dir):
        """Repeated scans give the same catalog."""
        first = scan(library_dir)
        second = scan(library_dir)

        assert first == second

    def test_videos_sorted_by_location(self, tmp_path):
        """Videos come out sorted by path whatever the listing order."""
        for name in ["Show__3c.mp4", "Show__1z.mp4", "Show__2a.mp4"]:
            (tmp_path / name).touch()

        with patch.object(Path, "iterdir", lambda self: iter([
            self / "Show__3c.mp4", self / "Show__1z.mp4", self / "Show__2a.mp4",
        ])):
            catalog = scan(tmp_path)

        videos = catalog.channels["Show"].videos
        assert [v.title for v in videos] == ["z.mp4", "a.mp4", "c.mp4"]
        assert all(a.location <= b.location for a, b in zip(videos, videos[1:]))

    def test_does_not_recurse(self, library_dir):
        """Files under subdirectories, watched/ included, are not indexed."""
        (library_dir / "watched" / "Foo__3Old.mp4").touch()
        nested = library_dir / "Nested__1Dir"
        nested.mkdir()
        (nested / "Nested__1Inner.mp4").touch()

        catalog = scan(library_dir)

        assert "Nested" not in catalog.channels
        assert [v.title for v in catalog.channels["Foo"].videos] == ["Bar.mp4", "Baz.mp4"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_skips_symlinks(self, tmp_path):
        """Symlinks are not regular files."""
        target = tmp_path / "real.mp4"
        target.touch()
        (tmp_path / "Link__1Video.mp4").symlink_to(target)

        catalog = scan(tmp_path)

        assert len(catalog) == 0

    def test_indexes_empty_title(self, tmp_path):
        """A file named channel__<n> is indexed with an empty title."""
        (tmp_path / "Foo__1").touch()
        (tmp_path / "Bar__").touch()

        catalog = scan(tmp_path)

        assert "Foo" in catalog
        assert catalog.get_video("Foo", "").location == tmp_path / "Foo__1"
        assert "Bar" not in catalog

    def test_accepts_string_root(self, library_dir):
        """Root may be given as a string."""
        catalog = scan(str(library_dir))

        assert "Foo" in catalog

    def test_empty_directory(self, tmp_path):
        """An empty directory gives an empty catalog."""
        catalog = scan(tmp_path)

        assert len(catalog) == 0
        assert catalog.video_count() == 0

    def test_missing_root_raises(self, tmp_path):
        """A missing root directory is fatal."""
        with pytest.raises(ScanError):
            scan(tmp_path / "missing")

    def test_root_is_file_raises(self, tmp_path):
        """A root that is a file is fatal."""
        root = tmp_path / "file.mp4"
        root.touch()

        with pytest.raises(ScanError):
            scan(root)

    def test_vanished_entry_raises(self, tmp_path):
        """An entry whose metadata cannot be read aborts the scan."""
        (tmp_path / "Foo__1Bar.mp4").touch()

        with patch.object(Path, "iterdir", lambda self: iter([self / "Foo__1Gone.mp4"])):
            with pytest.raises(ScanError) as exc_info:
                scan(tmp_path)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
