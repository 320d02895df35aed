"""TIFF enumerations used when assembling encoder tag entries."""

from enum import Enum, IntEnum


class DataType(IntEnum):
    """TIFF field types as stored in an IFD entry."""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12
    IFD = 13
    LONG8 = 16
    SLONG8 = 17
    IFD8 = 18


# Data types whose value is an offset to another directory
DIRECTORY_DATA_TYPES = frozenset({DataType.IFD, DataType.IFD8})


class Compression(IntEnum):
    """Values of the Compression tag (259)."""
    NONE = 1
    CCITT_1D = 2
    CCITT_GROUP3_FAX = 3
    CCITT_GROUP4_FAX = 4
    LZW = 5
    OLD_JPEG = 6
    JPEG = 7
    DEFLATE = 8
    PACKBITS = 32773
    OLD_DEFLATE = 32946


class PhotometricInterpretation(IntEnum):
    """Values of the PhotometricInterpretation tag (262)."""
    WHITE_IS_ZERO = 0
    BLACK_IS_ZERO = 1
    RGB = 2
    PALETTE_COLOR = 3
    TRANSPARENCY_MASK = 4
    SEPARATED = 5
    YCBCR = 6
    CIELAB = 8
    ICCLAB = 9
    ITULAB = 10


class Predictor(IntEnum):
    """Values of the Predictor tag (317)."""
    NONE = 1
    HORIZONTAL = 2
    FLOATING_POINT = 3


class ResolutionUnit(IntEnum):
    """Values of the ResolutionUnit tag (296)."""
    NONE = 1
    INCH = 2
    CENTIMETER = 3


class EncodingMode(IntEnum):
    """Pixel layout the encoder writes."""
    DEFAULT = 0
    RGB = 1
    GRAY = 2
    COLOR_PALETTE = 3
    BI_COLOR = 4


# Modes that store whole-byte samples; LZW and the predictor only apply here
BYTE_SAMPLE_MODES = frozenset({
    EncodingMode.RGB, EncodingMode.GRAY, EncodingMode.COLOR_PALETTE,
})


class EncoderCompression(IntEnum):
    """Compression requested from the encoder."""
    NONE = 0
    DEFLATE = 1
    LZW = 2
    PACKBITS = 3
    CCITT_GROUP3_FAX = 4
    MODIFIED_HUFFMAN = 5


class PixelResolutionUnit(IntEnum):
    """Resolution units of the image-level metadata."""
    ASPECT_RATIO = 0
    PIXELS_PER_INCH = 1
    PIXELS_PER_CENTIMETER = 2
    PIXELS_PER_METER = 3


class BitsPerPixel(IntEnum):
    PIXEL_1 = 1
    PIXEL_8 = 8
    PIXEL_24 = 24


class ByteOrder(Enum):
    LITTLE_ENDIAN = '<'
    BIG_ENDIAN = '>'


# 1 m = 100 cm
CENTIMETERS_PER_METER = 100.0


def meter_to_cm(value: float) -> float:
    """Convert a per-meter quantity to per-centimeter."""
    return value / CENTIMETERS_PER_METER
