"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from vidshelf.models.catalog import Catalog
from vidshelf.models.video import VideoEntry


@pytest.fixture
def library_dir(tmp_path):
    """Library directory with two channels, ignored files and watched/."""
    for name in [
        "Foo__1Bar.mp4",
        "Foo__2Baz.mp4",
        "Cooking__1Pasta Night.mkv",
        "Cooking__2Bread.mkv",
        "cooking__1lowercase.webm",
        ".hidden__1x.mp4",
        "NoDelim.mp4",
    ]:
        (tmp_path / name).write_bytes(b"fake video content")
    (tmp_path / "watched").mkdir()
    return tmp_path


@pytest.fixture
def sample_catalog():
    """Catalog built by hand, without touching the filesystem."""
    catalog = Catalog()
    root = Path("/videos")
    catalog.add_video("Foo", VideoEntry("Bar.mp4", root / "Foo__1Bar.mp4"))
    catalog.add_video("Foo", VideoEntry("baz.mp4", root / "Foo__2baz.mp4"))
    catalog.add_video("Foo", VideoEntry("Apple.mp4", root / "Foo__3Apple.mp4"))
    catalog.add_video("bar channel", VideoEntry("Quux.mkv", root / "bar channel__1Quux.mkv"))
    catalog.add_video("Zed", VideoEntry("Tutorial.webm", root / "Zed__1Tutorial.webm"))
    catalog.sort_videos()
    return catalog
