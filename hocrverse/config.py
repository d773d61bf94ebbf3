"""
Configuration for hocrverse extraction.

Holds the layout heuristics (footnote region, left margin, superscript rise),
the inclusive page window and the composite-pair list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal

import yaml

from hocrverse.exceptions import ConfigurationError

# Lines whose top y is at or below this fraction of the page height are footnotes
DEFAULT_FOOTNOTE_FRACTION = 0.82

# A verse number sits within this fraction of the page width from the left edge
DEFAULT_LEFT_MARGIN_FRACTION = 0.20

# Words whose top rises more than this many pixels above the line top are superscripts
DEFAULT_SUPERSCRIPT_RISE_PX = 5

EntityOrder = Literal["composites_first", "numeric"]

# ASCII digits with an optional leading plus; no underscores or other scripts
PAIR_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_optional_int(value: Any) -> bool:
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


def parse_composite_pairs(value: str) -> list[tuple[int, int]]:
    """Parse a composite pair list like ``"58-59,104-105"``.

    Empty chunks are ignored. Anything else that is not two positive
    integers joined by a single ``-`` is a configuration error.

    Args:
        value: Comma-separated ``A-B`` pairs.

    Returns:
        List of (A, B) tuples in configuration order.

    Raises:
        ConfigurationError: If any chunk is malformed.
    """
    value = value.strip()
    if not value:
        return []

    pairs = []
    seen: set[int] = set()
    for chunk in value.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue

        parts = chunk.split("-")
        if len(parts) != 2:
            raise ConfigurationError(f"bad pair {chunk!r} (want A-B)")

        left, right = parts[0].strip(), parts[1].strip()
        for part in (left, right):
            if not PAIR_NUMBER_PATTERN.fullmatch(part):
                raise ConfigurationError(f"bad pair {chunk!r}: {part!r} is not an integer")
        a, b = int(left), int(right)

        if a < 1 or b < 1:
            raise ConfigurationError(f"bad pair {chunk!r}: verse numbers must be positive")
        if a == b:
            raise ConfigurationError(f"bad pair {chunk!r}: a verse cannot pair with itself")

        # A verse may belong to only one entity
        for number in (a, b):
            if number in seen:
                raise ConfigurationError(f"verse {number} appears in more than one pair")
            seen.add(number)

        pairs.append((a, b))

    return pairs


@dataclass
class ExtractionConfig:
    """
    Configuration for verse extraction.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = ExtractionConfig(
        ...     page_min=60,
        ...     page_max=96,
        ...     composite_pairs="58-59,104-105",
        ... )
        >>> result = hocrverse.extract("dhammapada.hocr", config)
    """

    # Layout heuristics
    footnote_fraction: float = DEFAULT_FOOTNOTE_FRACTION
    left_margin_fraction: float = DEFAULT_LEFT_MARGIN_FRACTION
    superscript_rise_px: int = DEFAULT_SUPERSCRIPT_RISE_PX

    # Inclusive page window (hOCR ppageno); None = unbounded on that side
    page_min: int | None = None
    page_max: int | None = None

    # Entity grouping
    composite_pairs: str = ""
    entity_order: EntityOrder = "composites_first"

    # Parsed from composite_pairs in __post_init__
    pairs: list[tuple[int, int]] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self):
        """Validate configuration."""
        for name in ("footnote_fraction", "left_margin_fraction"):
            value = getattr(self, name)
            if not _is_number(value):
                raise ConfigurationError(
                    f"{name} must be a number, got {type(value).__name__} {value!r}"
                )
        for name in ("superscript_rise_px", "page_min", "page_max"):
            value = getattr(self, name)
            if name == "superscript_rise_px" and value is None:
                raise ConfigurationError("superscript_rise_px must be an integer, got None")
            if not _is_optional_int(value):
                raise ConfigurationError(
                    f"{name} must be an integer, got {type(value).__name__} {value!r}"
                )

        if not 0.0 < self.footnote_fraction <= 1.0:
            raise ConfigurationError(
                f"footnote_fraction must be in (0.0, 1.0], got {self.footnote_fraction}"
            )
        if not 0.0 <= self.left_margin_fraction <= 1.0:
            raise ConfigurationError(
                f"left_margin_fraction must be between 0.0 and 1.0, "
                f"got {self.left_margin_fraction}"
            )
        if self.superscript_rise_px < 0:
            raise ConfigurationError(
                f"superscript_rise_px must be >= 0, got {self.superscript_rise_px}"
            )
        if (
            self.page_min is not None
            and self.page_max is not None
            and self.page_min > self.page_max
        ):
            raise ConfigurationError(
                f"page_min ({self.page_min}) must not exceed page_max ({self.page_max})"
            )

        valid_orders = ("composites_first", "numeric")
        if self.entity_order not in valid_orders:
            raise ConfigurationError(
                f"entity_order must be one of {valid_orders}, got {self.entity_order!r}"
            )

        if not isinstance(self.composite_pairs, str):
            raise ConfigurationError(
                f"composite_pairs must be a string like '58-59,104-105', "
                f"got {type(self.composite_pairs).__name__}"
            )
        self.pairs = parse_composite_pairs(self.composite_pairs)

    def includes_page(self, page_number: int | None) -> bool:
        """Whether a page falls inside the configured window.

        Pages without a page number are always included.
        """
        if page_number is None:
            return True
        if self.page_min is not None and page_number < self.page_min:
            return False
        if self.page_max is not None and page_number > self.page_max:
            return False
        return True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExtractionConfig:
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(str(key) for key in set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ExtractionConfig:
        """
        Load configuration from a YAML file.

        Args:
            path: YAML file holding a mapping of config fields.

        Returns:
            Validated ExtractionConfig.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ConfigurationError: If the YAML is malformed or has unknown keys.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")

        return cls.from_dict(data)
