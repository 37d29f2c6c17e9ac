from typing import Optional

from .dates import format_mtime, normalize
from .models import (
    DateOrder,
    DateSource,
    FileEntry,
    Rename,
    RenamePlan,
    SkipNoMetadata,
    SkipUnparseable,
    Unparseable,
)
from .naming import compose


def plan(entry: FileEntry, raw: Optional[str], use_mdate_fallback: bool = False,
         order: DateOrder = DateOrder.MDY) -> RenamePlan:
    """Decide what to do with one file. Pure: reads nothing from disk."""
    if raw is not None and raw.strip():
        date = normalize(raw, order)
        if isinstance(date, Unparseable):
            return RenamePlan(entry, SkipUnparseable(date.raw, date.reason))
        return RenamePlan(entry, Rename(compose(entry.name, date), DateSource.METADATA))

    if use_mdate_fallback:
        date = format_mtime(entry.mtime)
        return RenamePlan(entry, Rename(compose(entry.name, date), DateSource.MODIFIED_TIME))

    return RenamePlan(entry, SkipNoMetadata())
