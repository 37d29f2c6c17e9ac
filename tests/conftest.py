"""
Shared fixtures for the daterename test suite.

Images are generated with Pillow so the metadata reader is exercised against
real files; pipeline tests mostly use a fake reader keyed by filename.
"""

import os
from datetime import datetime

import pytest
from PIL import ExifTags, Image
from PIL.PngImagePlugin import PngInfo


@pytest.fixture
def photo_dir(tmp_path):
    d = tmp_path / "photos"
    d.mkdir()
    return d


@pytest.fixture
def make_file(photo_dir):
    """Create an (empty) file, optionally with a given modification time."""

    def _make(name, mtime=None, content=b"\xff\xd8fake"):
        path = photo_dir / name
        path.write_bytes(content)
        if mtime is not None:
            ts = mtime.timestamp()
            os.utime(str(path), (ts, ts))
        return path

    return _make


@pytest.fixture
def make_jpeg(photo_dir):
    """Create a small real JPEG, with EXIF dates if given."""

    def _make(name, date_time=None, date_time_original=None):
        exif = Image.Exif()
        if date_time is not None:
            exif[ExifTags.Base.DateTime] = date_time
        if date_time_original is not None:
            exif[ExifTags.IFD.Exif] = {ExifTags.Base.DateTimeOriginal: date_time_original}
        path = photo_dir / name
        Image.new("RGB", (8, 8), "red").save(str(path), "JPEG", exif=exif)
        return path

    return _make


@pytest.fixture
def make_png(photo_dir):
    def _make(name, creation_time=None):
        info = PngInfo()
        if creation_time is not None:
            info.add_text("Creation Time", creation_time)
        path = photo_dir / name
        Image.new("RGB", (8, 8), "blue").save(str(path), "PNG", pnginfo=info)
        return path

    return _make


class FakeReader:
    """Metadata reader returning canned date strings by filename."""

    def __init__(self, dates):
        self.dates = dict(dates)
        self.calls = []

    def __call__(self, entry):
        self.calls.append(entry.name)
        return self.dates.get(entry.name)


class Recorder:
    """Wraps a collaborator and records its calls in a shared event list."""

    def __init__(self, events, label, func=None):
        self.events = events
        self.label = label
        self.func = func

    def __call__(self, *args):
        self.events.append((self.label,) + tuple(str(a) for a in args))
        if self.func is not None:
            return self.func(*args)


@pytest.fixture
def fake_reader():
    return FakeReader


@pytest.fixture
def recorder():
    return Recorder


@pytest.fixture
def fixed_start():
    return datetime(2024, 5, 6, 7, 8, 9)
