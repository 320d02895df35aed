"""Pixel-format entries derived from the encoder configuration.

Every derivation is total: configuration values outside the known set
fall back to RGB-shaped output and no compression rather than failing.
"""

from typing import Tuple

from tiffentries.collector import EntryCollector
from tiffentries.constants import (
    BYTE_SAMPLE_MODES,
    Compression,
    EncoderCompression,
    EncodingMode,
    PhotometricInterpretation,
    Predictor,
)
from tiffentries.entries import TagEntry
from tiffentries.models import ImageFormatConfig
from tiffentries.tiff.tags import (
    BITS_PER_SAMPLE,
    COMPRESSION,
    PHOTOMETRIC_INTERPRETATION,
    PREDICTOR,
    SAMPLES_PER_PIXEL,
)

_SINGLE_SAMPLE = (
    PhotometricInterpretation.PALETTE_COLOR,
    PhotometricInterpretation.BLACK_IS_ZERO,
    PhotometricInterpretation.WHITE_IS_ZERO,
)

_GRAYSCALE = (
    PhotometricInterpretation.BLACK_IS_ZERO,
    PhotometricInterpretation.WHITE_IS_ZERO,
)


def process_image_format(collector: EntryCollector,
                         config: ImageFormatConfig) -> None:
    """Upsert samples, bits, compression, photometric and predictor entries."""
    collector.add(TagEntry.long(SAMPLES_PER_PIXEL, get_samples_per_pixel(config)))
    collector.add(TagEntry.short_array(BITS_PER_SAMPLE, get_bits_per_sample(config)))
    collector.add(TagEntry.short(COMPRESSION, get_compression_type(config)))
    collector.add(TagEntry.short(PHOTOMETRIC_INTERPRETATION,
                                 int(config.photometric_interpretation)))

    if uses_predictor(config):
        collector.add(TagEntry.short(PREDICTOR, Predictor.HORIZONTAL))


def get_samples_per_pixel(config: ImageFormatConfig) -> int:
    if config.photometric_interpretation == PhotometricInterpretation.RGB:
        return 3
    if config.photometric_interpretation in _SINGLE_SAMPLE:
        return 1
    return 3


def get_bits_per_sample(config: ImageFormatConfig) -> Tuple[int, ...]:
    pi = config.photometric_interpretation
    if pi == PhotometricInterpretation.PALETTE_COLOR:
        return (8,)
    if pi == PhotometricInterpretation.RGB:
        return (8, 8, 8)
    if pi in _GRAYSCALE:
        if config.encoding_mode == EncodingMode.BI_COLOR:
            return (1,)
        return (8,)
    return (8, 8, 8)


def get_compression_type(config: ImageFormatConfig) -> Compression:
    requested = config.compression
    mode = config.encoding_mode

    # Deflate and PackBits work for every mode
    if requested == EncoderCompression.DEFLATE:
        return Compression.DEFLATE
    if requested == EncoderCompression.PACKBITS:
        return Compression.PACKBITS
    if requested == EncoderCompression.LZW and mode in BYTE_SAMPLE_MODES:
        return Compression.LZW
    if requested == EncoderCompression.CCITT_GROUP3_FAX and mode == EncodingMode.BI_COLOR:
        return Compression.CCITT_GROUP3_FAX
    if requested == EncoderCompression.MODIFIED_HUFFMAN and mode == EncodingMode.BI_COLOR:
        return Compression.CCITT_1D
    return Compression.NONE


def uses_predictor(config: ImageFormatConfig) -> bool:
    return bool(config.use_horizontal_predictor) and config.encoding_mode in BYTE_SAMPLE_MODES
