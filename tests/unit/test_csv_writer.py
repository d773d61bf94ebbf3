"""
Unit tests for CSV export.
"""

import csv

from hocrverse.models import TextEntity, VerseMapping
from hocrverse.writers import write_text_verses_csv, write_texts_csv


class TestTextsCsv:
    """Test texts.csv output."""

    def test_header_and_rows(self, tmp_path):
        path = tmp_path / "texts.csv"
        rows = write_texts_csv(
            path,
            [TextEntity(1, "58–59", "As on a heap."), TextEntity(2, "1", "All that we are.")],
        )
        assert rows == 2
        assert path.read_text(encoding="utf-8").splitlines() == [
            "id,label,text_body",
            '1,"58–59","As on a heap."',
            '2,"1","All that we are."',
        ]

    def test_quotes_doubled(self, tmp_path):
        """Embedded quotes survive a round trip through a CSV reader."""
        path = tmp_path / "texts.csv"
        body = 'He said "go", and left.'
        write_texts_csv(path, [TextEntity(1, "5", body)])

        assert '"He said ""go"", and left."' in path.read_text(encoding="utf-8")
        with open(path, encoding="utf-8", newline="") as f:
            records = list(csv.DictReader(f))
        assert records == [{"id": "1", "label": "5", "text_body": body}]

    def test_empty(self, tmp_path):
        path = tmp_path / "texts.csv"
        assert write_texts_csv(path, []) == 0
        assert path.read_text(encoding="utf-8") == "id,label,text_body\n"


class TestTextVersesCsv:
    """Test text_verses.csv output."""

    def test_header_and_rows(self, tmp_path):
        path = tmp_path / "text_verses.csv"
        rows = write_text_verses_csv(
            path, [VerseMapping(1, 58), VerseMapping(1, 59), VerseMapping(2, 1)]
        )
        assert rows == 3
        assert path.read_text(encoding="utf-8") == (
            "text_id,verse_number\n1,58\n1,59\n2,1\n"
        )
