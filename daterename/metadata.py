import logging
from typing import Optional

from PIL import ExifTags, Image, UnidentifiedImageError

from .models import FileEntry

logger = logging.getLogger(__name__)

# Tags tried in order: the Exif sub-IFD first, then the root IFD
EXIF_DATE_TAGS = (ExifTags.Base.DateTimeOriginal, ExifTags.Base.DateTimeDigitized)
ROOT_DATE_TAGS = (ExifTags.Base.DateTime,)

# PNG text chunk keyword for the capture time
PNG_CREATION_TIME = "Creation Time"


def _first_value(tags, keys):
    for key in keys:
        value = tags.get(key)
        if isinstance(value, bytes):
            value = value.decode("ascii", errors="ignore")
        if value and str(value).strip(" \x00"):
            return str(value).strip(" \x00")
    return None


def read_date_taken(entry: FileEntry) -> Optional[str]:
    """
    Extract the raw "date taken" string from an image.

    Args:
        entry (FileEntry): The image to read.

    Returns:
        str or None: The date exactly as stored (EXIF dates look like
        "YYYY:MM:DD HH:MM:SS"), or None if the image has none or can't be read.
    """
    try:
        with Image.open(entry.path) as img:
            exif = img.getexif()
            value = _first_value(exif.get_ifd(ExifTags.IFD.Exif), EXIF_DATE_TAGS)
            if value is None:
                value = _first_value(exif, ROOT_DATE_TAGS)
            if value is None:
                value = _first_value(img.info, (PNG_CREATION_TIME,))
            return value
    except (OSError, UnidentifiedImageError, SyntaxError) as e:
        logger.warning("Could not read metadata from %s: %s", entry.name, e)
    return None
