#!/usr/bin/env python3
"""
Basic hocrverse Usage Example

This example demonstrates the core workflow:
1. Extract verses from an hOCR file
2. Inspect verses, entities and diagnostics
3. Run the layout stages by hand on a single page
4. Export to CSV
"""

from hocrverse import ExtractionConfig, extract
from hocrverse.extractors import LineBuilder, VerseAccumulator, stitch_page
from hocrverse.readers import HOCRReader
from hocrverse.writers import write_text_verses_csv, write_texts_csv


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Extraction
    # ─────────────────────────────────────────────────────────────────────────

    config = ExtractionConfig(
        page_min=60,  # Inclusive hOCR ppageno window
        page_max=96,
        composite_pairs="58-59,104-105",  # Verses posted together
    )

    result = extract("path/to/book_hocr.html", config)

    print(f"Verses: {len(result.verses)}")
    print(f"Entities: {len(result.entities)}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Inspect Results
    # ─────────────────────────────────────────────────────────────────────────

    for entity in result.entities[:5]:
        print(f"  [{entity.id}] {entity.label}: {entity.body[:60]}...")

    entity = result.entity_for_verse(59)
    if entity:
        print(f"Verse 59 is posted as {entity.label}")

    # Verses seen on more than one page (continuations or OCR misreads)
    for warning in result.warnings:
        print(f"  warning: {warning}")

    for line in result.processing_log:
        print(f"  {line}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Layout Stages by Hand
    # ─────────────────────────────────────────────────────────────────────────

    raw = HOCRReader().read("path/to/book_hocr.html")
    builder = LineBuilder(config)
    accumulator = VerseAccumulator()

    layout = builder.build(raw.pages[0])
    if layout is not None:
        for line in layout.lines:
            print(f"  x={line.first.x:>4}  {line.text}")
        stitch_page(layout.lines, accumulator, layout.left_cutoff, layout.page_number)
        print(f"Page 1 verses: {sorted(accumulator.verses)}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Export
    # ─────────────────────────────────────────────────────────────────────────

    write_texts_csv("texts.csv", result.entities)
    write_text_verses_csv("text_verses.csv", result.mappings)


if __name__ == "__main__":
    main()
