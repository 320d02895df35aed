"""General entries: dimensions, software, resolution, preserved metadata."""

import logging
from typing import Optional

from tiffentries.collector import EntryCollector
from tiffentries.constants import (
    PixelResolutionUnit,
    ResolutionUnit,
    meter_to_cm,
)
from tiffentries.entries import TagEntry
from tiffentries.models import FrameMetadata, Image, ImageMetadata
from tiffentries.tiff.tags import (
    IMAGE_LENGTH,
    IMAGE_WIDTH,
    RESOLUTION_UNIT,
    SOFTWARE,
    X_RESOLUTION,
    Y_RESOLUTION,
    ExifPart,
    TagClassifier,
    classify_tag,
    is_preserved_tag,
)

logger = logging.getLogger(__name__)

SOFTWARE_NAME = 'tiffentries'

# {image unit: (frame unit, rescale from per-meter)}
_RESOLUTION_UNITS = {
    PixelResolutionUnit.ASPECT_RATIO: (ResolutionUnit.NONE, False),
    PixelResolutionUnit.PIXELS_PER_INCH: (ResolutionUnit.INCH, False),
    PixelResolutionUnit.PIXELS_PER_CENTIMETER: (ResolutionUnit.CENTIMETER, False),
    PixelResolutionUnit.PIXELS_PER_METER: (ResolutionUnit.CENTIMETER, True),
}


def process_general(collector: EntryCollector, image: Image,
                    preserve_metadata: bool,
                    classify: TagClassifier = classify_tag) -> None:
    """Add dimension, software and resolution entries, then preserved tags."""
    frame_metadata = image.frame_metadata

    collector.add_unconditional(TagEntry.long(IMAGE_WIDTH, image.width))
    collector.add_unconditional(TagEntry.long(IMAGE_LENGTH, image.height))
    collector.add_unconditional(TagEntry.string(SOFTWARE, SOFTWARE_NAME))

    process_resolution(collector, image.metadata, frame_metadata)

    if preserve_metadata:
        process_metadata(collector, frame_metadata, classify)


def sync_resolution(image_metadata: ImageMetadata,
                    frame_metadata: FrameMetadata) -> None:
    """Copy the image resolution into the frame, converting the unit.

    TIFF has no per-meter unit, so pixels per meter are stored as pixels
    per centimeter.  Units outside the known set store no unit.
    """
    xres = image_metadata.horizontal_resolution
    yres = image_metadata.vertical_resolution

    unit, per_meter = _RESOLUTION_UNITS.get(image_metadata.resolution_units,
                                            (ResolutionUnit.NONE, False))
    if per_meter:
        xres = meter_to_cm(xres)
        yres = meter_to_cm(yres)

    frame_metadata.resolution_unit = unit
    frame_metadata.horizontal_resolution = xres
    frame_metadata.vertical_resolution = yres


def process_resolution(collector: EntryCollector, image_metadata: ImageMetadata,
                       frame_metadata: FrameMetadata) -> None:
    sync_resolution(image_metadata, frame_metadata)

    collector.add_unconditional(
        TagEntry.rational(X_RESOLUTION, frame_metadata.horizontal_resolution))
    collector.add_unconditional(
        TagEntry.rational(Y_RESOLUTION, frame_metadata.vertical_resolution))
    collector.add_unconditional(
        TagEntry.short(RESOLUTION_UNIT, frame_metadata.resolution_unit))


def preservation_skip_reason(entry: TagEntry,
                             classify: TagClassifier = classify_tag) -> Optional[str]:
    """Why a frame tag is not carried over, or None if it is."""
    # Directory offsets would dangle in the new file
    if entry.is_directory:
        return 'sub-directory pointer'
    part = classify(entry.tag)
    if part in (ExifPart.EXIF_TAGS, ExifPart.GPS_TAGS):
        return f'{part.value} tag'
    if part == ExifPart.IFD_TAGS and not is_preserved_tag(entry.tag):
        return 'not descriptive metadata'
    return None


def process_metadata(collector: EntryCollector, frame_metadata: FrameMetadata,
                     classify: TagClassifier = classify_tag) -> None:
    """Carry descriptive frame tags over; the first writer of a tag wins."""
    for entry in frame_metadata.frame_tags:
        reason = preservation_skip_reason(entry, classify)
        if reason is not None:
            logger.debug("skip %s: %s", entry.name, reason)
            continue
        if collector.contains(entry.tag):
            continue
        collector.add_unconditional(entry.copy())
