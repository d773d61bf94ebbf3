"""
Pytest configuration and fixtures for hocrverse tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_hocr(fixtures_dir) -> Path:
    """Six-page hOCR sample: two pages outside the window, one without bbox."""
    return fixtures_dir / "sample_hocr.html"


@pytest.fixture(scope="session")
def sample_config():
    """Config matching the sample: pages 5-6, pairs 3-4, 8-9 and 6-7."""
    from hocrverse import ExtractionConfig

    return ExtractionConfig(page_min=5, page_max=6, composite_pairs="3-4,8-9,6-7")
