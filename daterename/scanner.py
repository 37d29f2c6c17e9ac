from datetime import datetime
from pathlib import Path
from typing import List

from .models import FileEntry

# Supported image extensions (case-insensitive)
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png"}


def is_image(path: Path) -> bool:
    return path.suffix.lower() in IMAGE_EXTENSIONS


def list_candidate_files(directory: Path) -> List[FileEntry]:
    """
    List the images directly inside a folder, sorted by name.

    Subfolders (backup folders included) are not entered. The modification
    time is captured here once and not re-read later in the run.
    """
    files: List[FileEntry] = []
    for p in sorted(directory.iterdir(), key=lambda p: p.name):
        if not p.is_file() or not is_image(p):
            continue
        stat = p.stat()
        files.append(
            FileEntry(
                name=p.name,
                directory=directory,
                mtime=datetime.fromtimestamp(stat.st_mtime),
            )
        )
    return files
