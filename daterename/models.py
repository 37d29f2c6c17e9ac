from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union


class DateOrder(Enum):
    """Order of the month and day tokens in a metadata date string."""
    MDY = "mdy"
    DMY = "dmy"


class DateSource(Enum):
    METADATA = "metadata"
    MODIFIED_TIME = "modified time"


@dataclass(frozen=True)
class FileEntry:
    name: str
    directory: Path
    mtime: datetime

    @property
    def path(self) -> Path:
        return self.directory / self.name


@dataclass(frozen=True)
class CanonicalDate:
    """An 8 digit YYYYMMDD token."""
    token: str

    @property
    def year(self) -> str:
        return self.token[:4]

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True)
class Unparseable:
    raw: str
    reason: str = ""


ParsedDate = Union[CanonicalDate, Unparseable]


@dataclass(frozen=True)
class Rename:
    new_name: str
    date_source: DateSource


@dataclass(frozen=True)
class SkipNoMetadata:
    pass


@dataclass(frozen=True)
class SkipUnparseable:
    raw: str
    reason: str = ""


Decision = Union[Rename, SkipNoMetadata, SkipUnparseable]


@dataclass(frozen=True)
class RenamePlan:
    source: FileEntry
    decision: Decision

    @property
    def is_rename(self) -> bool:
        return isinstance(self.decision, Rename)


@dataclass
class RunCounters:
    total_scanned: int = 0
    renamed: int = 0
    unchanged: int = 0
    skipped: int = 0
    backed_up: int = 0
    failed: int = 0


@dataclass(frozen=True)
class RunOptions:
    directory: Path
    dry_run: bool = False
    backup: bool = False
    fallback_mdate: bool = False
    quiet: bool = False
    assume_yes: bool = False
    date_order: DateOrder = DateOrder.MDY
    log_name: str = "daterename.log"


@dataclass
class RunResult:
    counters: RunCounters
    plans: List[RenamePlan] = field(default_factory=list)
    backup_dir: Optional[Path] = None
    confirmed: bool = True
    report: List[str] = field(default_factory=list)
