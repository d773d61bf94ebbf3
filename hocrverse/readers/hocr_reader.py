"""
hOCR Reader using BeautifulSoup.

Reads the page/line/word hierarchy from hOCR markup (as produced by
Tesseract and the Internet Archive) into plain dataclasses.

This module provides raw extraction only - geometry is kept as the
unparsed ``title`` strings. Layout analysis is handled by the
extractors module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

from hocrverse.exceptions import DocumentReadError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bs4 import Tag

PAGE_CLASS = "ocr_page"
LINE_CLASS = "ocr_line"
WORD_CLASS = "ocrx_word"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawWord:
    """A word element: its title annotation and text content."""

    title: str
    text: str


@dataclass
class RawLine:
    """A line element with its words in source order."""

    title: str
    words: list[RawWord] = field(default_factory=list)


@dataclass
class RawPage:
    """A page element with its lines in source order.

    The title carries both ``bbox`` and (optionally) ``ppageno``.
    """

    index: int  # 0-based position in the document
    title: str
    lines: list[RawLine] = field(default_factory=list)


@dataclass
class RawDocument:
    """Raw hOCR content, before any layout analysis."""

    source_path: Path | None
    pages: list[RawPage]

    @property
    def page_count(self) -> int:
        """Number of page elements found."""
        return len(self.pages)


class HOCRReader:
    """Extracts raw page/line/word data from hOCR markup.

    Usage:
        reader = HOCRReader()
        raw = reader.read("/path/to/book_hocr.html")
        # raw.pages[0].lines[0].words[0].title, etc.
    """

    def __init__(self, *, parser: str = "html.parser"):
        """Initialize the reader.

        Args:
            parser: BeautifulSoup tree builder to use.
        """
        self.parser = parser

    def read(self, path: str | Path) -> RawDocument:
        """Read an hOCR file.

        Invalid UTF-8 bytes are replaced with U+FFFD rather than failing
        the whole document.

        Args:
            path: Path to the hOCR (HTML/XHTML) file.

        Returns:
            RawDocument with pages, lines and words.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            DocumentReadError: If the file can't be read or parsed.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"hOCR file not found: {path}")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise DocumentReadError(f"Failed to read {path}: {e}") from e

        try:
            markup = data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Invalid UTF-8 in %s (%s); replacing bad bytes", path, e.reason)
            markup = data.decode("utf-8", errors="replace")

        return self.read_string(markup, source_path=path)

    def read_string(self, markup: str, source_path: Path | None = None) -> RawDocument:
        """Parse hOCR markup that is already in memory.

        Raises:
            DocumentReadError: If the markup can't be parsed.
        """
        try:
            soup = BeautifulSoup(markup, self.parser)
        except Exception as e:
            raise DocumentReadError(f"Failed to parse hOCR markup: {e}") from e

        pages = list(self._extract_pages(soup))
        return RawDocument(source_path=source_path, pages=pages)

    def _extract_pages(self, soup: BeautifulSoup) -> Iterator[RawPage]:
        """Extract each page element in document order."""
        for index, page in enumerate(soup.select(f".{PAGE_CLASS}")):
            yield RawPage(
                index=index,
                title=_title(page),
                lines=[self._extract_line(line) for line in page.select(f".{LINE_CLASS}")],
            )

    def _extract_line(self, line: Tag) -> RawLine:
        """Extract a single line element and its words."""
        words = [
            RawWord(title=_title(word), text=word.get_text())
            for word in line.select(f".{WORD_CLASS}")
        ]
        return RawLine(title=_title(line), words=words)


def _title(tag: Tag) -> str:
    """Return a tag's title attribute, or an empty string."""
    value = tag.get("title")
    if value is None:
        return ""
    # Multi-valued attributes come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return value
