"""hOCR reading module.

Parses markup into raw page/line/word records; no layout analysis here.
"""

from hocrverse.readers.hocr_reader import (
    HOCRReader,
    RawDocument,
    RawLine,
    RawPage,
    RawWord,
)

__all__ = [
    # Classes
    "HOCRReader",
    "RawDocument",
    "RawPage",
    "RawLine",
    "RawWord",
]
