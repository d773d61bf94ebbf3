"""Export writers for extraction results."""

from hocrverse.writers.csv_writer import (
    TEXT_VERSES_HEADER,
    TEXTS_HEADER,
    write_text_verses_csv,
    write_texts_csv,
)

__all__ = [
    "write_texts_csv",
    "write_text_verses_csv",
    "TEXTS_HEADER",
    "TEXT_VERSES_HEADER",
]
