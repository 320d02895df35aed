"""Entry processors -- each populates one concern into an EntryCollector."""

from tiffentries.processors.general import (  # noqa: F401
    SOFTWARE_NAME,
    process_general,
    preservation_skip_reason,
    process_metadata,
    process_resolution,
    sync_resolution,
)
from tiffentries.processors.image_format import (  # noqa: F401
    get_bits_per_sample,
    get_compression_type,
    get_samples_per_pixel,
    process_image_format,
    uses_predictor,
)
