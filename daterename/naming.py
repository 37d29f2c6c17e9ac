import re

from .models import CanonicalDate

_UNDERSCORES = re.compile(r"_{2,}")
_HYPHENS = re.compile(r"-{2,}")


def compose(original_name: str, date: CanonicalDate) -> str:
    """
    Build the target filename for an image.

    Spaces are dropped, then any copy of the date (and of its year) that is
    already in the name, so renaming an already renamed file gives the same
    name back instead of stacking prefixes.

    Args:
        original_name (str): Current filename, extension included.
        date (CanonicalDate): Date token to prefix.

    Returns:
        str: The new filename, e.g. "20210304_IMG.jpg" for "IMG 2021.jpg".
    """
    token = str(date)
    name = original_name.replace(" ", "")
    # Removing the year can join digits into a new copy of it ("20202121")
    previous = None
    while name != previous:
        previous = name
        name = name.replace(token, "").replace(token[:4], "")
    name = _UNDERSCORES.sub("_", name)

    name = f"{token}_{name}"
    return _HYPHENS.sub("-", _UNDERSCORES.sub("_", name))
