"""
Layout extraction module.

Turns raw hOCR pages into verses and text entities:
- Geometry: bbox / ppageno parsing and page cutoffs
- Lines: footnote and superscript filtering, left-to-right ordering
- Stitcher: Idle/Open state machine feeding a shared VerseAccumulator
- Entities: composite pairs first, then single verses
"""

from hocrverse.extractors.entities import (
    AssemblyResult,
    EntityAssembler,
    assemble_entities,
    composite_label,
)
from hocrverse.extractors.geometry import (
    BoundingBox,
    PageGeometry,
    is_verse_number,
    parse_bbox,
    parse_page_number,
    to_int,
)
from hocrverse.extractors.lines import (
    Line,
    LineBuilder,
    PageLayout,
    Word,
)
from hocrverse.extractors.stitcher import (
    Idle,
    Open,
    VerseAccumulator,
    VerseStitcher,
    join_words,
    normalize_punctuation,
    stitch_page,
)

__all__ = [
    # Geometry
    "BoundingBox",
    "PageGeometry",
    "parse_bbox",
    "parse_page_number",
    "is_verse_number",
    "to_int",
    # Lines
    "LineBuilder",
    "PageLayout",
    "Line",
    "Word",
    # Stitcher
    "VerseStitcher",
    "VerseAccumulator",
    "Idle",
    "Open",
    "stitch_page",
    "join_words",
    "normalize_punctuation",
    # Entities
    "EntityAssembler",
    "AssemblyResult",
    "assemble_entities",
    "composite_label",
]
