"""
CSV export for text entities and verse mappings.

Produces the two import files the verse store expects:
- texts.csv: ``id,label,text_body``
- text_verses.csv: ``text_id,verse_number``
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hocrverse.models import TextEntity, VerseMapping

logger = logging.getLogger(__name__)

TEXTS_HEADER = ("id", "label", "text_body")
TEXT_VERSES_HEADER = ("text_id", "verse_number")


def write_texts_csv(path: str | Path, entities: Iterable[TextEntity]) -> int:
    """Write text entities to CSV.

    Label and body are always quoted; embedded quotes are doubled.

    Returns:
        Number of rows written (excluding the header).
    """
    path = Path(path)
    rows = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(",".join(TEXTS_HEADER) + "\n")
        # QUOTE_NONNUMERIC leaves the int id bare and quotes label/body
        writer = csv.writer(f, lineterminator="\n", quoting=csv.QUOTE_NONNUMERIC)
        for entity in entities:
            writer.writerow((entity.id, entity.label, entity.body))
            rows += 1

    logger.debug("Wrote %d texts to %s", rows, path)
    return rows


def write_text_verses_csv(path: str | Path, mappings: Iterable[VerseMapping]) -> int:
    """Write entity/verse join rows to CSV.

    Returns:
        Number of rows written (excluding the header).
    """
    path = Path(path)
    rows = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(TEXT_VERSES_HEADER)
        for mapping in mappings:
            writer.writerow((mapping.text_id, mapping.verse_number))
            rows += 1

    logger.debug("Wrote %d mappings to %s", rows, path)
    return rows
