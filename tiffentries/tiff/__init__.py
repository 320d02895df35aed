"""TIFF tag tables and the low-level directory reader.

Tag tables are re-exported here; the reader lives in
``tiffentries.tiff.parser`` and is imported from there directly since it
depends on ``tiffentries.entries``.
"""

# --- tags.py: tag ids, names, group classification ---
from tiffentries.tiff.tags import (  # noqa: F401
    ExifPart,
    TagClassifier,
    TAG_NAMES,
    IFD_TAG_NAMES,
    EXIF_TAG_NAMES,
    GPS_TAG_NAMES,
    PRESERVED_METADATA_TAGS,
    EXIF_IFD_POINTER_TAG,
    GPS_IFD_POINTER_TAG,
    classify_tag,
    is_preserved_tag,
    tag_name,
)
