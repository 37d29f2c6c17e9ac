import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

BACKUP_PREFIX = "backup_"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def copy_file(src: Path, dest_dir: Path) -> Path:
    """Copy a file, with its timestamps, into dest_dir under the same name."""
    dest = dest_dir / src.name
    if dest.exists():
        raise FileExistsError(f"Backup already exists: {dest}")
    shutil.copy2(str(src), str(dest))
    return dest


def rename_file(path: Path, new_name: str) -> Path:
    """Rename a file inside its own folder. Refuses to overwrite."""
    target = path.with_name(new_name)
    if target.exists():
        raise FileExistsError(f"Target already exists: {target.name}")
    path.rename(target)
    return target


class BackupDirectory:
    """
    Backup folder for one run.

    The path is fixed when the run starts; the folder itself is only created
    the first time a file is backed up.
    """

    def __init__(self, root: Path, started_at: Optional[datetime] = None):
        started_at = started_at or datetime.now()
        self.path = root / f"{BACKUP_PREFIX}{started_at.strftime(BACKUP_TIMESTAMP_FORMAT)}"
        self.created = False

    def ensure(self) -> Path:
        if not self.created:
            self.path.mkdir(parents=True, exist_ok=True)
            self.created = True
            logger.debug("Created backup folder %s", self.path)
        return self.path
