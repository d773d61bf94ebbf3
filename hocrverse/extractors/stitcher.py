"""
Verse stitcher.

Walks cleaned lines in order and assembles verse-number-prefixed text spans.
The stitcher is a two-state machine:

- Idle: no open verse; continuation lines are orphans and are dropped.
- Open(n): words are buffered for verse n.

A line opens a new verse when its leftmost word sits inside the left margin
and is a bare integer. Buffered text is flushed into a VerseAccumulator,
which is shared across pages so that a verse broken over a page boundary
ends up as one text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hocrverse.extractors.geometry import is_verse_number, to_int

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hocrverse.extractors.lines import Line

logger = logging.getLogger(__name__)

# OCR puts spaces before punctuation: "knows ." -> "knows."
SPACE_BEFORE_PUNCT = re.compile(r"\s+([,.;:!?])")


def normalize_punctuation(text: str) -> str:
    """Remove whitespace immediately preceding , . ; : ! or ?"""
    return SPACE_BEFORE_PUNCT.sub(r"\1", text)


def join_words(words: Iterable[str]) -> str:
    """Join tokens with single spaces and tidy punctuation spacing."""
    return normalize_punctuation(" ".join(words)).strip()


# =============================================================================
# ACCUMULATOR
# =============================================================================


@dataclass
class VerseAccumulator:
    """
    Verse number -> accumulated text, shared across all pages of a pass.

    Re-adding a known verse number appends with a single space. That is the
    normal case for a verse broken over a page, but it is indistinguishable
    from an OCR misread that duplicates a number, so every re-open is
    recorded in ``reopened``.
    """

    verses: dict[int, str] = field(default_factory=dict)
    pages: dict[int, list[int | None]] = field(default_factory=dict)
    reopened: list[tuple[int, int | None]] = field(default_factory=list)

    def add(self, verse_number: int, text: str, page_number: int | None = None) -> None:
        """Store or extend a verse's text; empty text is ignored."""
        text = text.strip()
        if not text:
            return

        previous = self.verses.get(verse_number)
        if previous is None:
            self.verses[verse_number] = text
            self.pages[verse_number] = [page_number]
            return

        self.verses[verse_number] = f"{previous} {text}".strip()
        self.pages[verse_number].append(page_number)
        self.reopened.append((verse_number, page_number))
        logger.warning("Verse %d seen again on page %s; appending", verse_number, page_number)

    def __contains__(self, verse_number: int) -> bool:
        return verse_number in self.verses

    def __len__(self) -> int:
        return len(self.verses)


# =============================================================================
# STATE MACHINE
# =============================================================================


@dataclass(frozen=True)
class Idle:
    """No verse is open."""


@dataclass(frozen=True)
class Open:
    """Accumulating text for ``verse_number``."""

    verse_number: int


StitcherState = Idle | Open

IDLE = Idle()


class VerseStitcher:
    """
    Stitches the lines of one page into an accumulator.

    Example:
        >>> acc = VerseAccumulator()
        >>> stitcher = VerseStitcher(acc, left_cutoff=100)
        >>> for line in lines:
        ...     stitcher.feed(line)
        >>> stitcher.flush()
        >>> acc.verses[12]
        'The fool who knows.'
    """

    def __init__(
        self,
        accumulator: VerseAccumulator,
        left_cutoff: int,
        page_number: int | None = None,
    ):
        """
        Initialize the stitcher.

        Args:
            accumulator: Shared verse map to flush into.
            left_cutoff: Max left x for a line-opening verse number.
            page_number: Page being stitched, for diagnostics only.
        """
        self.accumulator = accumulator
        self.left_cutoff = left_cutoff
        self.page_number = page_number
        self.state: StitcherState = IDLE
        self.buffer: list[str] = []
        self.orphan_lines = 0

    def starts_verse(self, line: Line) -> bool:
        """Whether a line opens a new verse."""
        first = line.first
        return first.x <= self.left_cutoff and is_verse_number(first.text)

    def feed(self, line: Line) -> None:
        """Advance the state machine by one line."""
        if self.starts_verse(line):
            self.flush()
            self.state = Open(to_int(line.first.text))
            self.buffer.extend(w.text for w in line.words[1:])
        elif isinstance(self.state, Open):
            self.buffer.extend(w.text for w in line.words)
        else:
            self.orphan_lines += 1
            logger.debug("Dropping orphan line on page %s: %r", self.page_number, line.text)

    def flush(self) -> None:
        """Finalize the open verse (if any) and return to Idle."""
        if isinstance(self.state, Open) and self.buffer:
            self.accumulator.add(
                self.state.verse_number,
                join_words(self.buffer),
                self.page_number,
            )
        self.state = IDLE
        self.buffer = []


def stitch_page(
    lines: Iterable[Line],
    accumulator: VerseAccumulator,
    left_cutoff: int,
    page_number: int | None = None,
) -> VerseStitcher:
    """Stitch all lines of one page, flushing at the end.

    Returns the finished stitcher so callers can read its counters.
    """
    stitcher = VerseStitcher(accumulator, left_cutoff, page_number)
    for line in lines:
        stitcher.feed(line)
    stitcher.flush()
    return stitcher
