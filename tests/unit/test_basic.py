"""
Basic tests for hocrverse package structure.

These tests verify the public API is importable and
basic result types behave correctly.
"""


class TestImports:
    """Test that the public API is importable."""

    def test_import_package(self):
        """Can import the main package."""
        import hocrverse

        assert hocrverse.__version__ == "0.1.0"

    def test_import_extract_functions(self):
        """Can import the extraction entry points."""
        from hocrverse import extract, extract_document, extract_string

        assert callable(extract)
        assert callable(extract_string)
        assert callable(extract_document)

    def test_import_config(self):
        """Can import configuration class."""
        from hocrverse import ExtractionConfig

        config = ExtractionConfig()
        assert config.footnote_fraction == 0.82

    def test_import_exceptions(self):
        """Can import exception classes."""
        from hocrverse import (
            ConfigurationError,
            DocumentReadError,
            ExtractionError,
            HocrVerseError,
        )

        # Verify inheritance
        assert issubclass(ConfigurationError, HocrVerseError)
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(DocumentReadError, HocrVerseError)
        assert issubclass(ExtractionError, HocrVerseError)


class TestExtractionResult:
    """Test ExtractionResult helpers."""

    def _result(self):
        from hocrverse import ExtractionResult, TextEntity, VerseMapping

        return ExtractionResult(
            entities=[TextEntity(1, "58–59", "a b"), TextEntity(2, "1", "c")],
            mappings=[VerseMapping(1, 58), VerseMapping(1, 59), VerseMapping(2, 1)],
            verses={58: "a", 59: "b", 1: "c"},
            source_path="book.hocr",
        )

    def test_entity_for_verse(self):
        result = self._result()
        assert result.entity_for_verse(59).label == "58–59"
        assert result.entity_for_verse(1).label == "1"
        assert result.entity_for_verse(400) is None

    def test_to_dict(self):
        data = self._result().to_dict()
        assert data["entities"][0] == {"id": 1, "label": "58–59", "body": "a b"}
        assert data["mappings"][-1] == {"text_id": 2, "verse_number": 1}
        assert list(data["verses"]) == ["1", "58", "59"]
        assert data["source_path"] == "book.hocr"
        assert data["warnings"] == []
