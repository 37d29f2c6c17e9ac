from datetime import datetime
from pathlib import Path

from daterename.models import (
    DateOrder,
    DateSource,
    FileEntry,
    Rename,
    SkipNoMetadata,
    SkipUnparseable,
)
from daterename.planner import plan

ENTRY = FileEntry("IMG 2021.jpg", Path("/photos"), datetime(2019, 8, 7, 12, 0))


def test_metadata_date():
    p = plan(ENTRY, "‎Tuesday, ‎March ‎4, ‎2021")
    assert p.source is ENTRY
    assert p.decision == Rename("20210304_IMG.jpg", DateSource.METADATA)
    assert p.is_rename


def test_metadata_wins_over_fallback():
    p = plan(ENTRY, "3/4/2021", use_mdate_fallback=True)
    assert p.decision.date_source is DateSource.METADATA


def test_unparseable_is_skipped_even_with_fallback():
    p = plan(ENTRY, "sometime in spring", use_mdate_fallback=True)
    assert isinstance(p.decision, SkipUnparseable)
    assert p.decision.raw == "sometime in spring"
    assert not p.is_rename


def test_absent_metadata_uses_mtime_when_enabled():
    for raw in (None, "", "  "):
        p = plan(ENTRY, raw, use_mdate_fallback=True)
        assert p.decision == Rename("20190807_IMG2021.jpg", DateSource.MODIFIED_TIME)


def test_absent_metadata_skipped_without_fallback():
    assert plan(ENTRY, None).decision == SkipNoMetadata()
    assert plan(ENTRY, "").decision == SkipNoMetadata()


def test_order_is_passed_through():
    p = plan(ENTRY, "4/3/2021", order=DateOrder.DMY)
    assert p.decision.new_name == "20210304_IMG.jpg"


def test_plan_is_deterministic():
    assert plan(ENTRY, "3/4/2021") == plan(ENTRY, "3/4/2021")
