"""
Command-line entry point.

Usage:
    hocrverse --in book_hocr.html --page-min 60 --page-max 96
    hocrverse --config extract.yaml --texts out/texts.csv -v
"""

from __future__ import annotations

import argparse
import logging
import sys

from hocrverse.config import ExtractionConfig
from hocrverse.exceptions import HocrVerseError
from hocrverse.extract import extract
from hocrverse.writers.csv_writer import write_text_verses_csv, write_texts_csv

logger = logging.getLogger("hocrverse")

DEFAULT_INPUT = "2015.223782.The-Dhammapada_hocr.html"
DEFAULT_PAGE_MIN = 60
DEFAULT_PAGE_MAX = 96
DEFAULT_PAIRS = "58-59,104-105,153-154,195-196,229-230,256-257,268-269,271-272"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hocrverse",
        description="Extract numbered verses from an hOCR file into CSV import files",
    )
    parser.add_argument("--in", dest="input", default=DEFAULT_INPUT, help="hOCR HTML file")
    parser.add_argument(
        "--texts", default="texts.csv", help="output CSV for texts (id,label,text_body)"
    )
    parser.add_argument(
        "--text-verses",
        "--text_verses",
        dest="text_verses",
        default="text_verses.csv",
        help="output CSV for text_verses (text_id,verse_number)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file; explicit flags override its values",
    )
    # None defaults so we can tell whether a flag was given explicitly
    parser.add_argument(
        "--page-min",
        type=int,
        default=None,
        help=f"min page (inclusive, hOCR ppageno) [default: {DEFAULT_PAGE_MIN}]",
    )
    parser.add_argument(
        "--page-max",
        type=int,
        default=None,
        help=f"max page (inclusive, hOCR ppageno) [default: {DEFAULT_PAGE_MAX}]",
    )
    parser.add_argument(
        "--pairs",
        default=None,
        help=f"comma-separated composite pairs A-B [default: {DEFAULT_PAIRS}]",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def load_config(args: argparse.Namespace) -> ExtractionConfig:
    """Merge YAML config (if any) with command-line flags.

    Without a YAML file the Dhammapada edition defaults apply.
    """
    if args.config:
        base = ExtractionConfig.from_yaml(args.config)
        values = {
            "footnote_fraction": base.footnote_fraction,
            "left_margin_fraction": base.left_margin_fraction,
            "superscript_rise_px": base.superscript_rise_px,
            "page_min": base.page_min,
            "page_max": base.page_max,
            "composite_pairs": base.composite_pairs,
            "entity_order": base.entity_order,
        }
    else:
        values = {
            "page_min": DEFAULT_PAGE_MIN,
            "page_max": DEFAULT_PAGE_MAX,
            "composite_pairs": DEFAULT_PAIRS,
        }

    if args.page_min is not None:
        values["page_min"] = args.page_min
    if args.page_max is not None:
        values["page_max"] = args.page_max
    if args.pairs is not None:
        values["composite_pairs"] = args.pairs

    return ExtractionConfig(**values)


def main(argv: list[str] | None = None) -> int:
    """Run the extractor; returns a process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
        result = extract(args.input, config)
        write_texts_csv(args.texts, result.entities)
        write_text_verses_csv(args.text_verses, result.mappings)
    except (HocrVerseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in result.processing_log:
        logger.debug(line)

    logger.info(
        "Extracted %d text entities; wrote %s and %s",
        len(result.entities),
        args.texts,
        args.text_verses,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
