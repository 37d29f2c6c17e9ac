import re
from datetime import datetime

from .models import CanonicalDate, DateOrder, ParsedDate, Unparseable

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

_WORD = re.compile(r"[^\W\d_]+")
# "\x00" after a number marks it as coming from a month name
_MONTH_MARK = "\x00"
_TOKEN = re.compile(r"(\d+)(\x00?)")


def _month_number(word):
    """Return the month number for a month name or its 3+ letter prefix, else None."""
    word = word.lower()
    if len(word) < 3:
        return None
    for i, name in enumerate(MONTH_NAMES, 1):
        if name.startswith(word):
            return i
    return None


def _replace_words(match):
    month = _month_number(match.group(0))
    # Month names become their number, every other word is just a separator
    return f" {month}{_MONTH_MARK} " if month else " "


def _scan(raw):
    """Return (digits, came_from_month_name) pairs in order of appearance."""
    text = _WORD.sub(_replace_words, raw)
    return [(digits, bool(mark)) for digits, mark in _TOKEN.findall(text) if digits.isascii()]


def tokenize(raw: str):
    """
    Split a free-form date string into its digit groups.

    Month names are turned into numbers first, so "Tuesday, March 4, 2021"
    gives ['3', '4', '2021']. Any other non-digit character (punctuation,
    weekday names, the invisible direction marks some shells embed) only
    separates tokens.
    """
    return [digits for digits, _ in _scan(raw)]


def normalize(raw, order: DateOrder = DateOrder.MDY) -> ParsedDate:
    """
    Parse a raw "date taken" string into a YYYYMMDD token.

    Args:
        raw (str): Date string as supplied by the metadata reader.
        order (DateOrder): Order of the month and day tokens. Strings that
            start with a 4 digit year (EXIF, ISO) are always read year first.

    Returns:
        CanonicalDate or Unparseable: Never raises on bad input.
    """
    if raw is None or not str(raw).strip():
        return Unparseable(raw or "", "empty date")
    raw = str(raw)
    try:
        parts = _scan(raw)
        if len(parts) < 3:
            return Unparseable(raw, f"expected 3 date parts, found {len(parts)}")

        tokens = [t for t, _ in parts[:3]]
        named = [i for i, (_, from_name) in enumerate(parts[:3]) if from_name]
        if len(tokens[0]) == 4:
            year, month, day = tokens[0], tokens[1], tokens[2]
        elif named:
            # A spelled-out month settles the order: "4 March 2021", "March 4, 2021"
            month = tokens[named[0]]
            day, year = [t for i, t in enumerate(tokens) if i != named[0]]
        elif order is DateOrder.DMY:
            day, month, year = tokens[0], tokens[1], tokens[2]
        else:
            month, day, year = tokens[0], tokens[1], tokens[2]

        month = month.zfill(2)
        day = day.zfill(2)
        if len(year) != 4:
            return Unparseable(raw, f"year {year!r} is not 4 digits")
        if len(month) != 2 or not 1 <= int(month) <= 12:
            return Unparseable(raw, f"month {month!r} out of range")
        if len(day) != 2 or not 1 <= int(day) <= 31:
            return Unparseable(raw, f"day {day!r} out of range")
    except (TypeError, ValueError) as e:
        return Unparseable(raw, str(e))

    return CanonicalDate(year + month + day)


def format_mtime(mtime: datetime) -> CanonicalDate:
    """Format a file modification time as a date token."""
    return CanonicalDate(mtime.strftime("%Y%m%d"))
