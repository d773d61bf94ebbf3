"""
hocrverse: Recover numbered verses from hOCR scans.

This library reads an hOCR document (page/line/word elements with pixel
bounding boxes) and rebuilds its logical verses purely from geometry:
verse numbers in the left margin open a verse, footnote-region lines and
superscript markers are dropped, and verses broken across lines or pages
are stitched back together. Verses are then grouped into postable text
entities, either single verses or configured composite pairs.

Example:
    >>> import hocrverse
    >>> config = hocrverse.ExtractionConfig(page_min=60, page_max=96,
    ...                                     composite_pairs="58-59")
    >>> result = hocrverse.extract("dhammapada_hocr.html", config)
    >>> for entity in result.entities:
    ...     print(entity.id, entity.label)
"""

from hocrverse.config import ExtractionConfig, parse_composite_pairs
from hocrverse.exceptions import (
    ConfigurationError,
    DocumentReadError,
    ExtractionError,
    HocrVerseError,
)
from hocrverse.extract import (
    VerseExtractor,
    extract,
    extract_document,
    extract_string,
)
from hocrverse.models import (
    ExtractionResult,
    ExtractionStats,
    TextEntity,
    VerseMapping,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "extract",
    "extract_string",
    "extract_document",
    "VerseExtractor",
    # Configuration
    "ExtractionConfig",
    "parse_composite_pairs",
    # Output
    "ExtractionResult",
    "ExtractionStats",
    "TextEntity",
    "VerseMapping",
    # Exceptions
    "HocrVerseError",
    "ConfigurationError",
    "DocumentReadError",
    "ExtractionError",
]
