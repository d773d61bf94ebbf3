"""
Unit tests for the entity assembler.

Composite pairs, single verses, id assignment and verse mappings.
"""

from hocrverse.extractors.entities import (
    EntityAssembler,
    assemble_entities,
    composite_label,
)
from hocrverse.models import TextEntity, VerseMapping

VERSES = {
    1: "All that we are.",
    2: "If a man speaks.",
    58: "As on a heap of rubbish.",
    59: "So among those blinded.",
    104: "Conquest of self.",
    105: "Not even a god.",
    200: "Let us live happily.",
}


class TestCompositeLabel:
    def test_uses_en_dash(self):
        """Composite labels join with an en-dash, not a hyphen."""
        assert composite_label(58, 59) == "58–59"


class TestSingles:
    """Test single-verse entities."""

    def test_no_pairs(self):
        """Without pairs every verse is a single, in ascending order."""
        result = assemble_entities({3: "c", 1: "a", 2: "b"})
        assert result.entities == [
            TextEntity(1, "1", "a"),
            TextEntity(2, "2", "b"),
            TextEntity(3, "3", "c"),
        ]
        assert result.mappings == [
            VerseMapping(1, 1),
            VerseMapping(2, 2),
            VerseMapping(3, 3),
        ]

    def test_empty_verse_map(self):
        result = assemble_entities({}, [(1, 2)])
        assert result.entities == []
        assert result.mappings == []


class TestComposites:
    """Test composite pair entities."""

    def test_both_sides_present(self):
        """Body is A's text then B's text, space-joined."""
        result = assemble_entities(VERSES, [(58, 59)])
        first = result.entities[0]
        assert first == TextEntity(1, "58–59", "As on a heap of rubbish. So among those blinded.")
        assert result.mappings[:2] == [VerseMapping(1, 58), VerseMapping(1, 59)]

    def test_one_side_missing(self):
        """Pair (58, 59) with only 58 present: body is 58's text alone."""
        result = assemble_entities({57: "x", 58: "Only fifty-eight."}, [(58, 59)])

        assert result.entities[0] == TextEntity(1, "58–59", "Only fifty-eight.")
        labels = [e.label for e in result.entities]
        assert "58" not in labels
        assert "59" not in labels
        assert labels == ["58–59", "57"]

    def test_only_second_side_present(self):
        result = assemble_entities({59: "Fifty-nine."}, [(58, 59)])
        assert result.entities == [TextEntity(1, "58–59", "Fifty-nine.")]

    def test_both_sides_missing_skipped(self):
        """A pair with neither verse present produces nothing."""
        result = assemble_entities({1: "a"}, [(58, 59)])
        assert result.entities == [TextEntity(1, "1", "a")]
        assert result.mappings == [VerseMapping(1, 1)]

    def test_pair_emits_both_mappings_even_if_one_missing(self):
        """Both pair members are mapped to the composite entity."""
        result = assemble_entities({58: "a"}, [(58, 59)])
        assert result.mappings == [VerseMapping(1, 58), VerseMapping(1, 59)]

    def test_pairs_in_configuration_order(self):
        """Composites keep configuration order, not numeric order."""
        result = assemble_entities(VERSES, [(104, 105), (58, 59)])
        assert [e.label for e in result.entities[:2]] == ["104–105", "58–59"]


class TestIdAssignment:
    """Test ids and the mapping invariants."""

    def test_composites_first_then_ascending_singles(self):
        result = assemble_entities(VERSES, [(104, 105), (58, 59)])
        assert [e.label for e in result.entities] == [
            "104–105",
            "58–59",
            "1",
            "2",
            "200",
        ]

    def test_ids_contiguous_from_one(self):
        result = assemble_entities(VERSES, [(58, 59), (104, 105), (300, 301)])
        assert [e.id for e in result.entities] == list(range(1, len(result.entities) + 1))

    def test_every_verse_mapped_exactly_once(self):
        result = assemble_entities(VERSES, [(58, 59), (104, 105)])
        mapped = [m.verse_number for m in result.mappings]
        assert sorted(mapped) == sorted(VERSES)
        assert len(mapped) == len(set(mapped))

    def test_mappings_reference_existing_entities(self):
        result = assemble_entities(VERSES, [(58, 59)])
        ids = {e.id for e in result.entities}
        assert {m.text_id for m in result.mappings} <= ids


class TestNumericOrder:
    """Test the alternative entity ordering."""

    def test_entities_sorted_by_lowest_verse(self):
        assembler = EntityAssembler([(104, 105), (58, 59)], order="numeric")
        result = assembler.assemble(VERSES)
        assert [e.label for e in result.entities] == [
            "1",
            "2",
            "58–59",
            "104–105",
            "200",
        ]
        assert [e.id for e in result.entities] == [1, 2, 3, 4, 5]

    def test_mappings_follow_new_ids(self):
        assembler = EntityAssembler([(58, 59)], order="numeric")
        result = assembler.assemble({1: "a", 58: "b", 59: "c"})
        assert result.mappings == [
            VerseMapping(1, 1),
            VerseMapping(2, 58),
            VerseMapping(2, 59),
        ]
