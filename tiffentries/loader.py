"""Build an Image description from an existing TIFF file's first IFD."""

import logging
from pathlib import Path
from typing import List, Tuple

from tiffentries.constants import ByteOrder, PixelResolutionUnit, ResolutionUnit
from tiffentries.entries import TagEntry
from tiffentries.models import (
    FrameMetadata,
    Image,
    ImageMetadata,
    TiffMetadata,
    first_value,
)
from tiffentries.tiff.parser import TIFFHeader, iter_ifds, read_header, read_tag_entry
from tiffentries.tiff.tags import IMAGE_LENGTH, IMAGE_WIDTH

logger = logging.getLogger(__name__)

_PIXEL_UNITS = {
    ResolutionUnit.INCH: PixelResolutionUnit.PIXELS_PER_INCH,
    ResolutionUnit.CENTIMETER: PixelResolutionUnit.PIXELS_PER_CENTIMETER,
}


def read_first_ifd_entries(filepath: Path) -> Tuple[TIFFHeader, List[TagEntry]]:
    """Decode every readable entry of the first IFD.

    Raises ValueError if the file is not a TIFF or has no directory.
    """
    with open(filepath, 'rb') as f:
        header = read_header(f)
        if header is None:
            raise ValueError(f'Not a valid TIFF file: {filepath}')
        ifds = iter_ifds(f, header, max_pages=1)
        if not ifds:
            raise ValueError(f'No image directory in {filepath}')
        _, raw_entries = ifds[0]

        entries = []
        for raw in raw_entries:
            entry = read_tag_entry(f, header, raw)
            if entry is None:
                logger.debug("%s: could not decode %s (type %d, count %d)",
                             filepath, raw.tag_name, raw.dtype, raw.count)
                continue
            entries.append(entry)
    return header, entries


def load_image(filepath) -> Image:
    """Describe the image stored in ``filepath`` for re-encoding."""
    filepath = Path(filepath)
    header, entries = read_first_ifd_entries(filepath)

    frame_metadata = FrameMetadata.from_entries(entries)
    byte_order = ByteOrder(header.endian)

    width = height = 0
    for entry in entries:
        if entry.tag == IMAGE_WIDTH:
            width = _dimension(entry, filepath)
        elif entry.tag == IMAGE_LENGTH:
            height = _dimension(entry, filepath)

    image_metadata = ImageMetadata(
        horizontal_resolution=frame_metadata.horizontal_resolution or 0.0,
        vertical_resolution=frame_metadata.vertical_resolution or 0.0,
        resolution_units=_PIXEL_UNITS.get(frame_metadata.resolution_unit,
                                          PixelResolutionUnit.ASPECT_RATIO),
    )
    return Image(
        width=width,
        height=height,
        metadata=image_metadata,
        frame_metadata=frame_metadata,
        tiff_metadata=TiffMetadata.from_entries(entries, byte_order),
    )


def _dimension(entry: TagEntry, filepath: Path) -> int:
    value = first_value(entry.value)
    if not isinstance(value, int) or value < 0:
        raise ValueError(f'Invalid {entry.name} in {filepath}: {entry.value!r}')
    return value
