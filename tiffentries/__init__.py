"""tiffentries -- tag-entry assembly for TIFF image encoders."""

__version__ = "1.0.0"

from tiffentries.constants import (
    Compression,
    DataType,
    EncoderCompression,
    EncodingMode,
    PhotometricInterpretation,
    PixelResolutionUnit,
    Predictor,
    ResolutionUnit,
)
from tiffentries.entries import Rational, TagEntry
from tiffentries.collector import DuplicateTagError, EntryCollector
from tiffentries.models import (
    FrameMetadata,
    Image,
    ImageFormatConfig,
    ImageMetadata,
    TiffMetadata,
)
from tiffentries.processors import process_general, process_image_format
from tiffentries.assembly import collect_entries


# Lazy import: the loader pulls in the binary reader
def load_image(*args, **kwargs):
    from tiffentries.loader import load_image as _load_image
    return _load_image(*args, **kwargs)


__all__ = [
    "__version__",
    "Compression",
    "DataType",
    "EncoderCompression",
    "EncodingMode",
    "PhotometricInterpretation",
    "PixelResolutionUnit",
    "Predictor",
    "ResolutionUnit",
    "Rational",
    "TagEntry",
    "DuplicateTagError",
    "EntryCollector",
    "FrameMetadata",
    "Image",
    "ImageFormatConfig",
    "ImageMetadata",
    "TiffMetadata",
    "process_general",
    "process_image_format",
    "collect_entries",
    "load_image",
]
