"""
Data models for hocrverse.

These models represent the output of verse extraction: the text entities
handed to a downstream store and the join rows linking them to verses.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TextEntity:
    """A postable text: one verse, or a composite of two.

    The label is the verse number ("151") or an en-dash joined pair ("58–59").
    """

    id: int
    label: str
    body: str


@dataclass(frozen=True)
class VerseMapping:
    """Join row recording that verse ``verse_number`` belongs to entity ``text_id``."""

    text_id: int
    verse_number: int


@dataclass
class ExtractionStats:
    """Counters collected during a single extraction pass."""

    pages_seen: int = 0
    pages_processed: int = 0
    pages_out_of_window: int = 0
    pages_without_bbox: int = 0
    lines_kept: int = 0
    lines_in_footnote_region: int = 0
    lines_without_bbox: int = 0
    superscripts_dropped: int = 0
    orphan_lines: int = 0
    verses_reopened: int = 0


@dataclass
class ExtractionResult:
    """
    The main output type for users.

    Contains the finished verse map, the text entities built from it,
    the entity-to-verse mappings and any warnings from processing.

    Example:
        >>> result = hocrverse.extract("dhammapada.hocr")
        >>> for entity in result.entities:
        ...     print(entity.label, entity.body[:40])
    """

    # Core output
    entities: list[TextEntity]
    mappings: list[VerseMapping]

    # Verse number -> accumulated text
    verses: dict[int, str] = field(default_factory=dict)

    # Source info
    source_path: str | None = None

    # Diagnostics
    stats: ExtractionStats = field(default_factory=ExtractionStats)
    warnings: list[str] = field(default_factory=list)
    processing_log: list[str] = field(default_factory=list)

    def entity_for_verse(self, verse_number: int) -> TextEntity | None:
        """Find the entity a verse was assigned to, if any."""
        for mapping in self.mappings:
            if mapping.verse_number == verse_number:
                return self.entities[mapping.text_id - 1]
        return None

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the result
        """
        return {
            "entities": [
                {"id": e.id, "label": e.label, "body": e.body} for e in self.entities
            ],
            "mappings": [
                {"text_id": m.text_id, "verse_number": m.verse_number} for m in self.mappings
            ],
            "verses": {str(n): text for n, text in sorted(self.verses.items())},
            "source_path": self.source_path,
            "warnings": self.warnings,
        }
