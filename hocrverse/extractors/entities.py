"""
Entity assembler: groups finished verses into postable text entities.

Configured composite pairs are emitted first (in configuration order), then
every unconsumed verse as a single, in ascending verse order. A pair with
only one side present still consumes both numbers, so the present verse is
never emitted twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hocrverse.models import TextEntity, VerseMapping

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from hocrverse.config import EntityOrder

EN_DASH = "–"


def composite_label(a: int, b: int) -> str:
    """Label for a composite pair, e.g. ``58–59``."""
    return f"{a}{EN_DASH}{b}"


@dataclass
class _Group:
    """An entity before ids are assigned."""

    label: str
    body: str
    verse_numbers: tuple[int, ...]


@dataclass
class AssemblyResult:
    """Entities and their verse mappings, ids contiguous from 1."""

    entities: list[TextEntity] = field(default_factory=list)
    mappings: list[VerseMapping] = field(default_factory=list)


class EntityAssembler:
    """
    Builds TextEntity and VerseMapping lists from a verse map.

    Attributes:
        pairs: Composite (A, B) pairs in configuration order.
        order: "composites_first" (default) or "numeric", which sorts all
            entities by their lowest verse number.

    Example:
        >>> assembler = EntityAssembler([(58, 59)])
        >>> result = assembler.assemble({57: "a", 58: "b"})
        >>> [e.label for e in result.entities]
        ['58–59', '57']
    """

    def __init__(
        self,
        pairs: Sequence[tuple[int, int]] = (),
        order: EntityOrder = "composites_first",
    ):
        self.pairs = list(pairs)
        self.order = order

    def assemble(self, verses: Mapping[int, str]) -> AssemblyResult:
        """Group verses into entities and assign ids."""
        groups = []
        consumed: set[int] = set()

        for a, b in self.pairs:
            if a not in verses and b not in verses:
                continue
            texts = [t for t in (verses.get(a, ""), verses.get(b, "")) if t.strip()]
            groups.append(
                _Group(
                    label=composite_label(a, b),
                    body=" ".join(texts).strip(),
                    verse_numbers=(a, b),
                )
            )
            consumed.update((a, b))

        for number in sorted(verses):
            if number in consumed:
                continue
            groups.append(_Group(label=str(number), body=verses[number], verse_numbers=(number,)))

        if self.order == "numeric":
            groups.sort(key=lambda g: min(g.verse_numbers))

        result = AssemblyResult()
        for entity_id, group in enumerate(groups, start=1):
            result.entities.append(TextEntity(id=entity_id, label=group.label, body=group.body))
            for number in group.verse_numbers:
                result.mappings.append(VerseMapping(text_id=entity_id, verse_number=number))

        return result


def assemble_entities(
    verses: Mapping[int, str],
    pairs: Sequence[tuple[int, int]] = (),
    order: EntityOrder = "composites_first",
) -> AssemblyResult:
    """Convenience wrapper around EntityAssembler."""
    return EntityAssembler(pairs, order).assemble(verses)
