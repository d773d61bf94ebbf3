"""
Geometry primitives for hOCR layout analysis.

hOCR stores geometry inside the ``title`` attribute as semicolon-separated
properties, e.g. ``"image book.tif; bbox 0 0 2480 3508; ppageno 61"``.
Everything here is lenient: a missing or malformed property is reported as
``None`` and the caller skips the element.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

BBOX_PATTERN = re.compile(r"bbox\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)", re.ASCII)
PAGE_NUMBER_PATTERN = re.compile(r"ppageno\s+(\d+)", re.ASCII)
INTEGER_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in page pixel space (origin top-left)."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        """Box width."""
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        """Box height."""
        return self.y1 - self.y0


@dataclass(frozen=True)
class PageGeometry:
    """Derived cutoffs for one page.

    Attributes:
        bbox: The page box.
        footnote_cutoff: Lines whose top y is at or below this are footnotes.
        left_cutoff: A verse number's left edge must be at or left of this.
    """

    bbox: BoundingBox
    footnote_cutoff: int
    left_cutoff: int

    @classmethod
    def from_bbox(
        cls,
        bbox: BoundingBox,
        footnote_fraction: float,
        left_margin_fraction: float,
    ) -> PageGeometry:
        """Compute cutoffs as fractions of the page height and width."""
        return cls(
            bbox=bbox,
            footnote_cutoff=bbox.y0 + int(bbox.height * footnote_fraction),
            left_cutoff=bbox.x0 + int(bbox.width * left_margin_fraction),
        )


def to_int(value: str) -> int:
    """Parse an integer, treating anything unparseable as zero."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_bbox(title: str) -> BoundingBox | None:
    """Parse the ``bbox`` property of an hOCR title.

    Returns None when the property is absent, or when the corners are
    out of order (x0 > x1 or y0 > y1).
    """
    match = BBOX_PATTERN.search(title or "")
    if match is None:
        return None

    x0, y0, x1, y1 = (to_int(g) for g in match.groups())
    if x0 > x1 or y0 > y1:
        return None
    return BoundingBox(x0, y0, x1, y1)


def parse_page_number(title: str) -> int | None:
    """Parse the ``ppageno`` property; None means no page-number constraint."""
    match = PAGE_NUMBER_PATTERN.search(title or "")
    if match is None:
        return None
    return to_int(match.group(1))


def is_verse_number(token: str) -> bool:
    """Whether a token is a bare non-negative integer literal."""
    return bool(INTEGER_PATTERN.fullmatch(token))
