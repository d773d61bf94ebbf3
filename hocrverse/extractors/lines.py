"""
Line builder: turns one raw hOCR page into cleaned, reading-ordered lines.

Filtering rules:
- Lines whose top edge falls in the footnote region are dropped whole.
- Words rising above the line top by more than the superscript threshold are
  dropped (inline verse-number and note-reference superscripts).
- Words without a box or with empty text are dropped, as are lines left empty.

Words are sorted left to right; lines keep their document order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hocrverse.extractors.geometry import (
    BoundingBox,
    PageGeometry,
    parse_bbox,
    parse_page_number,
)

if TYPE_CHECKING:
    from hocrverse.config import ExtractionConfig
    from hocrverse.models import ExtractionStats
    from hocrverse.readers.hocr_reader import RawLine, RawPage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Word:
    """A word token and its left edge."""

    x: int
    text: str


@dataclass
class Line:
    """A cleaned line: its box and words in reading order."""

    bbox: BoundingBox
    words: list[Word]

    @property
    def first(self) -> Word:
        """Leftmost word."""
        return self.words[0]

    @property
    def text(self) -> str:
        """Words joined with single spaces."""
        return " ".join(w.text for w in self.words)


@dataclass
class PageLayout:
    """A page ready for stitching."""

    geometry: PageGeometry
    page_number: int | None
    lines: list[Line] = field(default_factory=list)

    @property
    def left_cutoff(self) -> int:
        """Left-margin cutoff for verse numbers on this page."""
        return self.geometry.left_cutoff


@dataclass
class LineStats:
    """Filter counters for a single page."""

    lines_kept: int = 0
    lines_in_footnote_region: int = 0
    lines_without_bbox: int = 0
    superscripts_dropped: int = 0

    def add_to(self, stats: ExtractionStats) -> None:
        """Fold these counters into document-level stats."""
        stats.lines_kept += self.lines_kept
        stats.lines_in_footnote_region += self.lines_in_footnote_region
        stats.lines_without_bbox += self.lines_without_bbox
        stats.superscripts_dropped += self.superscripts_dropped


class LineBuilder:
    """
    Builds cleaned lines for a page using configurable layout thresholds.

    Example:
        >>> builder = LineBuilder(ExtractionConfig())
        >>> layout = builder.build(raw_page)
        >>> [line.text for line in layout.lines]
        ['12 The fool', 'who knows.']
    """

    def __init__(self, config: ExtractionConfig):
        self.footnote_fraction = config.footnote_fraction
        self.left_margin_fraction = config.left_margin_fraction
        self.superscript_rise_px = config.superscript_rise_px
        self.stats = LineStats()

    def build(self, page: RawPage) -> PageLayout | None:
        """
        Build the layout for a page.

        Args:
            page: Raw page from the hOCR reader.

        Returns:
            PageLayout, or None if the page has no usable bounding box.
        """
        self.stats = LineStats()

        bbox = parse_bbox(page.title)
        if bbox is None:
            logger.debug("Page %d has no bbox, skipping", page.index)
            return None

        geometry = PageGeometry.from_bbox(bbox, self.footnote_fraction, self.left_margin_fraction)
        layout = PageLayout(geometry=geometry, page_number=parse_page_number(page.title))

        for raw_line in page.lines:
            line = self.build_line(raw_line, geometry.footnote_cutoff)
            if line is not None:
                layout.lines.append(line)

        self.stats.lines_kept = len(layout.lines)
        return layout

    def build_line(self, raw_line: RawLine, footnote_cutoff: int) -> Line | None:
        """Clean a single line; None if it is dropped."""
        line_box = parse_bbox(raw_line.title)
        if line_box is None:
            self.stats.lines_without_bbox += 1
            return None

        if line_box.y0 >= footnote_cutoff:
            self.stats.lines_in_footnote_region += 1
            return None

        words = []
        for raw_word in raw_line.words:
            word_box = parse_bbox(raw_word.title)
            if word_box is None:
                continue

            text = raw_word.text.strip()
            if not text:
                continue

            if self.is_superscript(word_box, line_box):
                self.stats.superscripts_dropped += 1
                continue

            words.append(Word(x=word_box.x0, text=text))

        if not words:
            return None

        words.sort(key=lambda w: w.x)
        return Line(bbox=line_box, words=words)

    def is_superscript(self, word_box: BoundingBox, line_box: BoundingBox) -> bool:
        """A word whose top sits above the line top by more than the threshold."""
        return word_box.y0 < line_box.y0 - self.superscript_rise_px
