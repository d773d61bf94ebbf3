"""
Exception classes for hocrverse.

All hocrverse exceptions inherit from HocrVerseError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     result = hocrverse.extract("book.hocr", config)
    ... except hocrverse.ConfigurationError as e:
    ...     print(f"Bad configuration: {e}")
    ... except hocrverse.HocrVerseError as e:
    ...     print(f"hocrverse error: {e}")
"""


class HocrVerseError(Exception):
    """
    Base exception for all hocrverse errors.

    Catch this to handle any hocrverse-specific error.
    """

    pass


class ConfigurationError(HocrVerseError, ValueError):
    """
    Raised for invalid configuration.

    Configuration is operator-authored, so a bad value aborts the run
    instead of silently producing mis-grouped verses.

    Example:
        >>> parse_composite_pairs("58-59,104")
        ConfigurationError: bad pair '104' (want A-B)
    """

    pass


class DocumentReadError(HocrVerseError):
    """Raised when the source markup cannot be read or parsed as a whole."""

    pass


class ExtractionError(HocrVerseError):
    """
    Raised when extraction fails unexpectedly.

    Element-level defects (missing boxes, bad numerals, orphan lines) never
    raise; they are skipped while the pass continues.
    """

    pass
