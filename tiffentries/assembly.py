"""Run both entry processors for one encode."""

import logging

from tiffentries.collector import EntryCollector
from tiffentries.models import Image, ImageFormatConfig
from tiffentries.processors import process_general, process_image_format
from tiffentries.tiff.tags import TagClassifier, classify_tag

logger = logging.getLogger(__name__)


def collect_entries(image: Image, config: ImageFormatConfig,
                    preserve_metadata: bool = False,
                    classify: TagClassifier = classify_tag) -> EntryCollector:
    """Build the entry collection for encoding ``image`` with ``config``.

    Note that the image's frame metadata is updated with the synchronized
    resolution as a side effect.
    """
    collector = EntryCollector()
    process_general(collector, image, preserve_metadata, classify)
    process_image_format(collector, config)
    logger.debug("collected %d entries (%dx%d, preserve_metadata=%s)",
                 len(collector), image.width, image.height, preserve_metadata)
    return collector
