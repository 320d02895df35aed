"""Low-level TIFF/BigTIFF directory reader -- stdlib only (struct module).

Handles both standard TIFF (magic 42) and BigTIFF (magic 43) formats,
with little-endian (II) and big-endian (MM) byte orders.  Only reads;
writing directories is the serializer's job.
"""

import logging
import struct
from typing import BinaryIO, Dict, List, Optional, Tuple

from tiffentries.constants import DataType
from tiffentries.entries import Rational, TagEntry
from tiffentries.tiff.tags import tag_name

logger = logging.getLogger(__name__)

# TIFF type definitions: {type_id: (element_size_bytes, struct_format_char)}
TIFF_TYPES: Dict[int, Tuple[int, str]] = {
    1: (1, 'B'),    # BYTE
    2: (1, 's'),    # ASCII
    3: (2, 'H'),    # SHORT
    4: (4, 'I'),    # LONG
    5: (8, 'II'),   # RATIONAL (num/denom)
    6: (1, 'b'),    # SBYTE
    7: (1, 's'),    # UNDEFINED
    8: (2, 'h'),    # SSHORT
    9: (4, 'i'),    # SLONG
    10: (8, 'ii'),  # SRATIONAL
    11: (4, 'f'),   # FLOAT
    12: (8, 'd'),   # DOUBLE
    13: (4, 'I'),   # IFD
    16: (8, 'Q'),   # LONG8 (BigTIFF)
    17: (8, 'q'),   # SLONG8 (BigTIFF, signed)
    18: (8, 'Q'),   # IFD8 (BigTIFF)
}

# Maximum plausible tag count per IFD.  Anything vastly beyond this means
# the IFD pointer landed in image data and the "tag count" is garbage.
MAX_IFD_ENTRIES = 1000

# Values longer than this are not decoded (strip offset tables and the like)
MAX_DECODED_VALUES = 65536


class IFDEntry:
    """A single raw IFD (Image File Directory) entry."""
    __slots__ = ('tag_id', 'dtype', 'count', 'value_offset')

    def __init__(self, tag_id: int, dtype: int, count: int, value_offset: int):
        self.tag_id = tag_id
        self.dtype = dtype
        self.count = count
        self.value_offset = value_offset

    @property
    def tag_name(self) -> str:
        return tag_name(self.tag_id)

    @property
    def total_size(self) -> int:
        elem_size = TIFF_TYPES.get(self.dtype, (1, 'B'))[0]
        return elem_size * self.count


class TIFFHeader:
    """Parsed TIFF file header."""
    __slots__ = ('endian', 'is_bigtiff', 'first_ifd_offset')

    def __init__(self, endian: str, is_bigtiff: bool, first_ifd_offset: int):
        self.endian = endian
        self.is_bigtiff = is_bigtiff
        self.first_ifd_offset = first_ifd_offset


def read_header(f: BinaryIO) -> Optional[TIFFHeader]:
    """Read and validate TIFF/BigTIFF header. Returns None if not a valid TIFF."""
    f.seek(0)
    bo = f.read(2)
    if bo == b'II':
        endian = '<'
    elif bo == b'MM':
        endian = '>'
    else:
        return None

    data = f.read(2)
    if len(data) < 2:
        return None
    magic = struct.unpack(endian + 'H', data)[0]

    if magic == 42:
        data = f.read(4)
        if len(data) < 4:
            return None
        return TIFFHeader(endian, False, struct.unpack(endian + 'I', data)[0])
    elif magic == 43:
        data = f.read(12)
        if len(data) < 12:
            return None
        bytesize = struct.unpack(endian + 'H', data[:2])[0]
        if bytesize != 8:
            return None
        return TIFFHeader(endian, True, struct.unpack(endian + 'Q', data[4:])[0])
    else:
        return None


def read_ifd(f: BinaryIO, header: TIFFHeader,
             ifd_offset: int) -> Tuple[List[IFDEntry], int]:
    """Read all entries from an IFD. Returns (entries, next_ifd_offset)."""
    endian = header.endian
    f.seek(ifd_offset)

    if header.is_bigtiff:
        data = f.read(8)
        if len(data) < 8:
            return [], 0
        num_entries = struct.unpack(endian + 'Q', data)[0]
        entry_size = 20
        inline_threshold = 8
    else:
        data = f.read(2)
        if len(data) < 2:
            return [], 0
        num_entries = struct.unpack(endian + 'H', data)[0]
        entry_size = 12
        inline_threshold = 4

    if num_entries > MAX_IFD_ENTRIES:
        logger.debug("read_ifd: %d entries at offset %d, treating as corrupt",
                     num_entries, ifd_offset)
        return [], 0

    entries = []
    for _ in range(num_entries):
        entry_offset = f.tell()
        data = f.read(entry_size)
        if len(data) < entry_size:
            break

        if header.is_bigtiff:
            tag_id, dtype = struct.unpack(endian + 'HH', data[:4])
            count = struct.unpack(endian + 'Q', data[4:12])[0]
            value_field = 12
            pointer_fmt = 'Q'
        else:
            tag_id, dtype, count = struct.unpack(endian + 'HHI', data[:8])
            value_field = 8
            pointer_fmt = 'I'

        elem_size = TIFF_TYPES.get(dtype, (1, 'B'))[0]
        if elem_size * count <= inline_threshold:
            value_offset = entry_offset + value_field
        else:
            value_offset = struct.unpack(endian + pointer_fmt,
                                         data[value_field:entry_size])[0]

        entries.append(IFDEntry(tag_id, dtype, count, value_offset))

    if header.is_bigtiff:
        next_data = f.read(8)
        next_offset = struct.unpack(endian + 'Q', next_data)[0] if len(next_data) == 8 else 0
    else:
        next_data = f.read(4)
        next_offset = struct.unpack(endian + 'I', next_data)[0] if len(next_data) == 4 else 0

    return entries, next_offset


def iter_ifds(f: BinaryIO, header: TIFFHeader,
              max_pages: int = 500) -> List[Tuple[int, List[IFDEntry]]]:
    """Iterate through IFD chain. Returns list of (ifd_offset, entries)."""
    result = []
    offset = header.first_ifd_offset
    seen = set()

    while offset != 0 and len(result) < max_pages:
        if offset in seen:
            logger.debug("iter_ifds: IFD loop at offset %d", offset)
            break
        seen.add(offset)
        entries, next_offset = read_ifd(f, header, offset)
        if not entries:
            break
        result.append((offset, entries))
        offset = next_offset

    return result


def read_tag_value_bytes(f: BinaryIO, entry: IFDEntry) -> bytes:
    """Read the raw bytes of a tag value."""
    f.seek(entry.value_offset)
    return f.read(entry.total_size)


def read_tag_value(f: BinaryIO, header: TIFFHeader, entry: IFDEntry):
    """Decode a tag value into a Python value.

    Scalars come back as plain numbers, multi-valued tags as tuples.
    Returns None for unknown types, oversized values, or truncated data.
    """
    if entry.dtype not in TIFF_TYPES or entry.count > MAX_DECODED_VALUES:
        return None
    raw = read_tag_value_bytes(f, entry)
    if len(raw) < entry.total_size:
        return None

    if entry.dtype == DataType.ASCII:
        return raw.split(b'\x00', 1)[0].decode('utf-8', errors='replace')
    if entry.dtype in (DataType.BYTE, DataType.UNDEFINED):
        return raw

    fmt_char = TIFF_TYPES[entry.dtype][1]
    values = struct.unpack(header.endian + fmt_char * entry.count, raw)
    if entry.dtype in (DataType.RATIONAL, DataType.SRATIONAL):
        values = tuple(Rational(values[i], values[i + 1])
                       for i in range(0, len(values), 2))

    if entry.count == 1:
        return values[0]
    return tuple(values)


def read_tag_entry(f: BinaryIO, header: TIFFHeader,
                   entry: IFDEntry) -> Optional[TagEntry]:
    """Read a raw IFD entry into a TagEntry. Returns None if undecodable."""
    value = read_tag_value(f, header, entry)
    if value is None:
        return None
    is_array = isinstance(value, tuple) and not isinstance(value, Rational)
    return TagEntry(entry.tag_id, DataType(entry.dtype), value, is_array)
