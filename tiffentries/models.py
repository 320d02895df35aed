"""Data models for tiffentries: encoder configuration and image metadata."""

import copy
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Type, Union

from tiffentries.constants import (
    BitsPerPixel,
    ByteOrder,
    Compression,
    EncoderCompression,
    EncodingMode,
    PhotometricInterpretation,
    PixelResolutionUnit,
    ResolutionUnit,
)
from tiffentries.entries import TagEntry
from tiffentries.tiff.tags import (
    BITS_PER_SAMPLE,
    COMPRESSION,
    RESOLUTION_UNIT,
    X_RESOLUTION,
    XMP,
    Y_RESOLUTION,
)


def parse_enum_value(enum_cls: Type[Enum], raw, key: str = 'value',
                     allow_unknown_int: bool = False):
    """Resolve a config value to an enum member.

    Accepts a member, a numeric value, or a member name in any case and
    spelling (``"BlackIsZero"``, ``"black_is_zero"``, ``"black-is-zero"``).
    Unknown numbers are returned as-is when ``allow_unknown_int`` is set,
    provided they fit a SHORT field.
    """
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        try:
            return enum_cls(raw)
        except ValueError:
            if allow_unknown_int and 0 <= raw <= 0xFFFF:
                return raw
            raise ValueError(f'Unknown {key}: {raw}') from None
    if isinstance(raw, str):
        wanted = raw.replace('_', '').replace('-', '').replace(' ', '').upper()
        for member in enum_cls:
            if member.name.replace('_', '') == wanted:
                return member
        if raw.strip().isdigit():
            return parse_enum_value(enum_cls, int(raw), key, allow_unknown_int)
    raise ValueError(f'Unknown {key}: {raw!r}')


@dataclass
class ImageFormatConfig:
    """Encoder settings that decide the pixel-format tags."""
    photometric_interpretation: Union[PhotometricInterpretation, int] = PhotometricInterpretation.RGB
    encoding_mode: EncodingMode = EncodingMode.RGB
    compression: EncoderCompression = EncoderCompression.NONE
    use_horizontal_predictor: bool = False

    @classmethod
    def default(cls) -> 'ImageFormatConfig':
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> 'ImageFormatConfig':
        """Build a config from a mapping; omitted keys keep their defaults."""
        config = cls.default()
        if 'photometric_interpretation' in data:
            config.photometric_interpretation = parse_enum_value(
                PhotometricInterpretation, data['photometric_interpretation'],
                'photometric_interpretation', allow_unknown_int=True)
        if 'encoding_mode' in data:
            config.encoding_mode = parse_enum_value(
                EncodingMode, data['encoding_mode'], 'encoding_mode')
        if 'compression' in data:
            config.compression = parse_enum_value(
                EncoderCompression, data['compression'], 'compression')
        if 'use_horizontal_predictor' in data:
            predictor = data['use_horizontal_predictor']
            if not isinstance(predictor, bool):
                raise ValueError('use_horizontal_predictor must be true or false')
            config.use_horizontal_predictor = predictor
        return config

    @classmethod
    def from_json(cls, path) -> 'ImageFormatConfig':
        """Load a config from a JSON file.

        JSON format::

            {
              "photometric_interpretation": "BlackIsZero",
              "encoding_mode": "Gray",
              "compression": "Lzw",
              "use_horizontal_predictor": true
            }

        All keys are optional.  Enumerations may be given by name or number.
        """
        with open(str(path), 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f'Config must be a JSON object: {path}')
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        pi = self.photometric_interpretation
        return {
            'photometric_interpretation': pi.name if isinstance(pi, Enum) else pi,
            'encoding_mode': self.encoding_mode.name,
            'compression': self.compression.name,
            'use_horizontal_predictor': self.use_horizontal_predictor,
        }


@dataclass
class ImageMetadata:
    """Resolution information attached to the whole image."""
    horizontal_resolution: float = 96.0
    vertical_resolution: float = 96.0
    resolution_units: PixelResolutionUnit = PixelResolutionUnit.PIXELS_PER_INCH


@dataclass
class FrameMetadata:
    """TIFF-specific metadata of one frame.

    ``frame_tags`` holds the entries the frame was decoded with; they are
    the source for metadata preservation on re-encode.
    """
    horizontal_resolution: Optional[float] = None
    vertical_resolution: Optional[float] = None
    resolution_unit: ResolutionUnit = ResolutionUnit.INCH
    frame_tags: List[TagEntry] = field(default_factory=list)

    @classmethod
    def from_entries(cls, entries: Iterable[TagEntry]) -> 'FrameMetadata':
        tags = list(entries)
        meta = cls(frame_tags=tags)
        for entry in tags:
            if entry.tag == X_RESOLUTION:
                meta.horizontal_resolution = _first_float(entry.value)
            elif entry.tag == Y_RESOLUTION:
                meta.vertical_resolution = _first_float(entry.value)
            elif entry.tag == RESOLUTION_UNIT:
                try:
                    meta.resolution_unit = ResolutionUnit(first_value(entry.value))
                except (TypeError, ValueError):
                    meta.resolution_unit = ResolutionUnit.NONE
        return meta

    def get_tag(self, tag: int) -> Optional[TagEntry]:
        for entry in self.frame_tags:
            if entry.tag == tag:
                return entry
        return None


@dataclass
class TiffMetadata:
    """Image-level TIFF properties recorded when a file is decoded."""
    byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN
    bits_per_pixel: Union[BitsPerPixel, int] = BitsPerPixel.PIXEL_24
    compression: Union[Compression, int] = Compression.NONE
    xmp_profile: Optional[bytes] = None

    @classmethod
    def from_entries(cls, entries: Iterable[TagEntry],
                     byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'TiffMetadata':
        meta = cls(byte_order=byte_order)
        for entry in entries:
            if entry.tag == BITS_PER_SAMPLE:
                values = entry.value if isinstance(entry.value, tuple) else (entry.value,)
                total = sum(int(v) for v in values)
                try:
                    meta.bits_per_pixel = BitsPerPixel(total)
                except ValueError:
                    meta.bits_per_pixel = total
            elif entry.tag == COMPRESSION:
                code = first_value(entry.value)
                try:
                    meta.compression = Compression(code)
                except ValueError:
                    meta.compression = code
            elif entry.tag == XMP:
                value = entry.value
                meta.xmp_profile = value.encode('utf-8') if isinstance(value, str) else bytes(value)
        return meta

    def deep_clone(self) -> 'TiffMetadata':
        return copy.deepcopy(self)


@dataclass
class Image:
    """The parts of an image the entry assembly reads."""
    width: int
    height: int
    metadata: ImageMetadata = field(default_factory=ImageMetadata)
    frame_metadata: FrameMetadata = field(default_factory=FrameMetadata)
    tiff_metadata: TiffMetadata = field(default_factory=TiffMetadata)


def first_value(value):
    """First element of an array value; scalars come back unchanged."""
    if isinstance(value, (list, tuple)) and not hasattr(value, 'numerator'):
        return value[0] if value else None
    return value


def _first_float(value) -> Optional[float]:
    value = first_value(value)
    if value is None:
        return None
    return float(value)
