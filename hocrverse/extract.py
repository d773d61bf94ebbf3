"""
Extraction orchestrator.

This module provides the main `extract()` function that turns an hOCR file
into an ExtractionResult by wiring together:
- HOCRReader (raw page/line/word extraction)
- LineBuilder (footnote/superscript filtering, reading order)
- VerseStitcher (verse boundaries, shared VerseAccumulator)
- EntityAssembler (composite pairs and singles)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from hocrverse.config import ExtractionConfig
from hocrverse.exceptions import ExtractionError, HocrVerseError
from hocrverse.extractors.entities import EntityAssembler
from hocrverse.extractors.geometry import parse_page_number
from hocrverse.extractors.lines import LineBuilder
from hocrverse.extractors.stitcher import VerseAccumulator, stitch_page
from hocrverse.models import ExtractionResult, ExtractionStats
from hocrverse.readers.hocr_reader import HOCRReader, RawDocument

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Verse Extractor
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class ExtractionContext:
    """State accumulated during a single extraction pass."""

    raw_doc: RawDocument
    config: ExtractionConfig
    accumulator: VerseAccumulator = field(default_factory=VerseAccumulator)
    stats: ExtractionStats = field(default_factory=ExtractionStats)
    processing_log: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class VerseExtractor:
    """
    Builds an ExtractionResult from a RawDocument.

    Pages are visited in document order and lines within a page in
    document order. Stitcher state never crosses a page boundary, but the
    verse accumulator does, so a verse split across pages is merged.
    """

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        """Initialize the extractor."""
        self.config = config or ExtractionConfig()
        self.line_builder = LineBuilder(self.config)
        self.assembler = EntityAssembler(self.config.pairs, self.config.entity_order)

    def build(self, raw_doc: RawDocument) -> ExtractionResult:
        """
        Build an ExtractionResult from a RawDocument.

        Args:
            raw_doc: The raw hOCR data

        Returns:
            Verses, entities and mappings for the document
        """
        ctx = ExtractionContext(raw_doc=raw_doc, config=self.config)
        ctx.processing_log.append(
            f"Starting extraction from {raw_doc.source_path or '<markup>'} "
            f"({raw_doc.page_count} pages)"
        )

        # Step 1: Stitch verses page by page
        self._stitch_pages(ctx)

        # Step 2: Surface duplicate verse numbers
        self._collect_reopened(ctx)

        # Step 3: Group verses into entities
        assembly = self.assembler.assemble(ctx.accumulator.verses)

        ctx.processing_log.append(
            f"Extraction complete: {len(ctx.accumulator)} verses, "
            f"{len(assembly.entities)} entities, {len(assembly.mappings)} mappings"
        )

        return ExtractionResult(
            entities=assembly.entities,
            mappings=assembly.mappings,
            verses=dict(ctx.accumulator.verses),
            source_path=str(raw_doc.source_path) if raw_doc.source_path else None,
            stats=ctx.stats,
            warnings=ctx.warnings,
            processing_log=ctx.processing_log,
        )

    def _stitch_pages(self, ctx: ExtractionContext) -> None:
        """Run the line builder and stitcher over every in-window page."""
        for page in ctx.raw_doc.pages:
            ctx.stats.pages_seen += 1

            page_number = parse_page_number(page.title)
            if not self.config.includes_page(page_number):
                ctx.stats.pages_out_of_window += 1
                logger.debug("Page %s outside window, skipping", page_number)
                continue

            layout = self.line_builder.build(page)
            if layout is None:
                ctx.stats.pages_without_bbox += 1
                continue

            self.line_builder.stats.add_to(ctx.stats)
            stitcher = stitch_page(
                layout.lines,
                ctx.accumulator,
                layout.left_cutoff,
                layout.page_number,
            )
            ctx.stats.orphan_lines += stitcher.orphan_lines
            ctx.stats.pages_processed += 1

        ctx.processing_log.append(
            f"Processed {ctx.stats.pages_processed}/{ctx.stats.pages_seen} pages "
            f"({ctx.stats.pages_out_of_window} outside window, "
            f"{ctx.stats.pages_without_bbox} without bbox)"
        )
        ctx.processing_log.append(
            f"Kept {ctx.stats.lines_kept} lines; dropped "
            f"{ctx.stats.lines_in_footnote_region} footnote lines, "
            f"{ctx.stats.lines_without_bbox} lines without bbox, "
            f"{ctx.stats.superscripts_dropped} superscripts, "
            f"{ctx.stats.orphan_lines} orphan lines"
        )

    def _collect_reopened(self, ctx: ExtractionContext) -> None:
        """Record a warning for every verse number seen more than once."""
        for verse_number, page_number in ctx.accumulator.reopened:
            where = f"page {page_number}" if page_number is not None else "an unnumbered page"
            ctx.warnings.append(
                f"Verse {verse_number} reopened on {where}; text appended to earlier fragment"
            )
        ctx.stats.verses_reopened = len(ctx.accumulator.reopened)


# ═══════════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════════


def extract(
    source: str | Path,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """
    Extract verses and text entities from an hOCR file.

    Args:
        source: Path to the hOCR file
        config: Extraction configuration (uses defaults if None)

    Returns:
        ExtractionResult with entities, mappings and the verse map

    Raises:
        FileNotFoundError: If source doesn't exist
        DocumentReadError: If the markup can't be read or parsed
        ExtractionError: If extraction fails unexpectedly

    Example:
        >>> result = extract("dhammapada_hocr.html", ExtractionConfig(page_min=60))
        >>> print(result.entities[0].label)
    """
    source = Path(source)
    config = config or ExtractionConfig()

    raw_doc = HOCRReader().read(source)
    return extract_document(raw_doc, config)


def extract_string(markup: str, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Extract from hOCR markup already in memory."""
    raw_doc = HOCRReader().read_string(markup)
    return extract_document(raw_doc, config)


def extract_document(
    raw_doc: RawDocument,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """Extract from a RawDocument produced by HOCRReader."""
    try:
        return VerseExtractor(config).build(raw_doc)
    except HocrVerseError:
        raise
    except Exception as e:
        source = raw_doc.source_path or "<markup>"
        raise ExtractionError(f"Failed to extract verses from {source}: {e}") from e
