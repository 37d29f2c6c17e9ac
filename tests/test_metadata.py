from datetime import datetime

from daterename.metadata import read_date_taken
from daterename.models import FileEntry


def entry_for(path):
    return FileEntry(path.name, path.parent, datetime.now())


def test_reads_date_time_original(make_jpeg):
    path = make_jpeg("orig.jpg", date_time="2020:01:01 00:00:00",
                     date_time_original="2021:03:04 10:15:00")
    assert read_date_taken(entry_for(path)) == "2021:03:04 10:15:00"


def test_falls_back_to_root_date_time(make_jpeg):
    path = make_jpeg("root.jpg", date_time="2019:12:31 23:59:59")
    assert read_date_taken(entry_for(path)) == "2019:12:31 23:59:59"


def test_jpeg_without_exif(make_jpeg):
    path = make_jpeg("plain.jpg")
    assert read_date_taken(entry_for(path)) is None


def test_png_creation_time(make_png):
    path = make_png("shot.png", creation_time="2022:07:08 09:10:11")
    assert read_date_taken(entry_for(path)) == "2022:07:08 09:10:11"


def test_png_without_metadata(make_png):
    assert read_date_taken(entry_for(make_png("bare.png"))) is None


def test_unreadable_file_is_treated_as_absent(make_file):
    path = make_file("broken.jpg", content=b"not an image at all")
    assert read_date_taken(entry_for(path)) is None


def test_missing_file_is_treated_as_absent(photo_dir):
    assert read_date_taken(FileEntry("gone.jpg", photo_dir, datetime.now())) is None
