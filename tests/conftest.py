"""Shared test fixtures -- synthetic TIFF/BigTIFF builders and image models."""

import struct

import pytest

from tiffentries.constants import DataType, PixelResolutionUnit, ResolutionUnit
from tiffentries.entries import Rational, TagEntry
from tiffentries.models import FrameMetadata, Image, ImageMetadata

# {type_id: (element_size, struct_format_char)}
_TYPES = {
    1: (1, 'B'), 2: (1, 's'), 3: (2, 'H'), 4: (4, 'I'), 5: (8, 'II'),
    7: (1, 's'), 8: (2, 'h'), 9: (4, 'i'), 11: (4, 'f'), 12: (8, 'd'),
    13: (4, 'I'), 16: (8, 'Q'),
}


def pack_values(type_id, value, endian='<'):
    """Pack a tag value: bytes pass through, ints and tuples are packed."""
    if isinstance(value, bytes):
        return value
    fmt_char = _TYPES[type_id][1]
    if isinstance(value, (list, tuple)):
        return struct.pack(endian + fmt_char * len(value), *value)
    return struct.pack(endian + fmt_char, value)


def rational_bytes(*pairs, endian='<'):
    """Pack (numerator, denominator) pairs as RATIONAL data."""
    flat = [n for pair in pairs for n in pair]
    return struct.pack(endian + 'I' * len(flat), *flat)


def ascii_bytes(text):
    return text.encode('ascii') + b'\x00'


def build_tiff(entries, endian='<', bigtiff=False):
    """Build a single-IFD TIFF (or BigTIFF) file in memory.

    Args:
        entries: List of (tag_id, type_id, count, value) tuples.  ``value``
            is an int, a tuple of ints, or raw bytes.  Values whose size
            fits the entry's value field are stored inline, the rest
            after the IFD.
        endian: '<' for little-endian, '>' for big-endian.
        bigtiff: Write a BigTIFF (magic 43) file.

    Returns:
        bytes: Complete TIFF file content.
    """
    bo = b'II' if endian == '<' else b'MM'
    if bigtiff:
        header = bo + struct.pack(endian + 'HHHQ', 43, 8, 0, 16)
        count_fmt, entry_size, field_size, ptr_fmt = 'Q', 20, 8, 'Q'
    else:
        header = bo + struct.pack(endian + 'HI', 42, 8)
        count_fmt, entry_size, field_size, ptr_fmt = 'H', 12, 4, 'I'

    n = len(entries)
    data_offset = (len(header) + struct.calcsize(count_fmt) + entry_size * n
                   + struct.calcsize(ptr_fmt))
    entry_bytes = b''
    data_bytes = b''

    for tag_id, type_id, count, value in entries:
        raw = pack_values(type_id, value, endian)
        head = struct.pack(endian + 'HH', tag_id, type_id)
        head += struct.pack(endian + ('Q' if bigtiff else 'I'), count)
        if _TYPES[type_id][0] * count <= field_size:
            entry_bytes += head + raw.ljust(field_size, b'\x00')[:field_size]
        else:
            entry_bytes += head + struct.pack(endian + ptr_fmt,
                                              data_offset + len(data_bytes))
            data_bytes += raw

    ifd = struct.pack(endian + count_fmt, n) + entry_bytes
    ifd += struct.pack(endian + ptr_fmt, 0)  # No next IFD
    return header + ifd + data_bytes


def build_tiff_two_ifds(first_entries, second_entries, endian='<'):
    """Two chained IFDs of inline-only entries."""
    first_size = 2 + 12 * len(first_entries) + 4
    second_offset = 8 + first_size

    def ifd(entries, next_offset):
        out = struct.pack(endian + 'H', len(entries))
        for tag_id, type_id, count, value in entries:
            raw = pack_values(type_id, value, endian).ljust(4, b'\x00')[:4]
            out += struct.pack(endian + 'HHI', tag_id, type_id, count) + raw
        return out + struct.pack(endian + 'I', next_offset)

    bo = b'II' if endian == '<' else b'MM'
    return (bo + struct.pack(endian + 'HI', 42, 8)
            + ifd(first_entries, second_offset) + ifd(second_entries, 0))


def photo_entries(endian='<'):
    """First-IFD entries of a scanned photo with mixed metadata."""
    return [
        (2, 5, 3, rational_bytes((45, 1), (30, 1), (0, 1), endian=endian)),  # GPSLatitude
        (256, 3, 1, 100),                          # ImageWidth
        (257, 3, 1, 50),                           # ImageLength
        (258, 3, 3, (8, 8, 8)),                    # BitsPerSample
        (259, 3, 1, 5),                            # Compression (LZW)
        (262, 3, 1, 2),                            # PhotometricInterpretation
        (270, 2, 11, ascii_bytes('Slide scan')),   # ImageDescription
        (271, 2, 5, ascii_bytes('Acme')),          # Make
        (282, 5, 1, rational_bytes((300, 1), endian=endian)),  # XResolution
        (283, 5, 1, rational_bytes((150, 1), endian=endian)),  # YResolution
        (296, 3, 1, 2),                            # ResolutionUnit (inch)
        (305, 2, 15, ascii_bytes('OldScanner 2.1')),  # Software
        (330, 13, 1, 0),                           # SubIFDs (IFD type)
        (700, 1, 12, b'<x:xmpmeta/>'),             # XMP
        (33432, 2, 8, ascii_bytes('(c) Lab')),     # Copyright
        (33434, 5, 1, rational_bytes((1, 125), endian=endian)),  # ExposureTime
        (34665, 4, 1, 0),                          # ExifIFDPointer
        (65000, 2, 7, ascii_bytes('vendor')),      # private tag
    ]


@pytest.fixture
def tmp_photo_tiff(tmp_path):
    filepath = tmp_path / 'photo.tif'
    filepath.write_bytes(build_tiff(photo_entries()))
    return filepath


@pytest.fixture
def tmp_photo_tiff_be(tmp_path):
    filepath = tmp_path / 'photo_be.tif'
    filepath.write_bytes(build_tiff(photo_entries('>'), endian='>'))
    return filepath


@pytest.fixture
def tmp_not_tiff(tmp_path):
    filepath = tmp_path / 'bad.tif'
    filepath.write_bytes(b'NOT A TIFF FILE')
    return filepath


# ---------------------------------------------------------------------------
# In-memory model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def frame_tags():
    """Frame tags covering every preservation branch."""
    return [
        TagEntry.string(33432, '(c) Lab'),                   # Copyright
        TagEntry.string(270, 'Slide scan'),                  # ImageDescription
        TagEntry.string(305, 'OldScanner 2.1'),              # Software
        TagEntry.short(274, 1),                              # Orientation
        TagEntry(33434, DataType.RATIONAL, Rational(1, 125)),  # ExposureTime
        TagEntry(2, DataType.RATIONAL,
                 (Rational(45, 1), Rational(30, 1), Rational(0, 1)), True),  # GPSLatitude
        TagEntry(330, DataType.IFD, 1024),                   # SubIFDs
        TagEntry(40093, DataType.BYTE, b'A\x00u\x00'),       # XPAuthor
        TagEntry.string(65000, 'vendor'),                    # private tag
    ]


@pytest.fixture
def image(frame_tags):
    return Image(
        width=100,
        height=50,
        metadata=ImageMetadata(200.0, 300.0, PixelResolutionUnit.PIXELS_PER_METER),
        frame_metadata=FrameMetadata(72.0, 72.0, ResolutionUnit.INCH, frame_tags),
    )
