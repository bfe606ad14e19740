"""
Pytest configuration and shared fixtures for pageflow tests.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from pageflow.document import PDFDocument


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture(scope="session")
def test_settings():
    """Settings independent of any .env file."""
    return Settings(
        _env_file=None,
        page_size="A4",
        margin=72,
        buffer_pages=False,
        default_font="Helvetica",
        default_font_size=12,
    )


# ============================================================================
# Fixtures: Documents
# ============================================================================

@pytest.fixture
def doc(test_settings) -> PDFDocument:
    """Small 400x300pt page with 20pt margins: content runs from y=20 to y=280."""
    return PDFDocument(page_size=(400, 300), margins=20, settings=test_settings)


@pytest.fixture
def buffered_doc(test_settings) -> PDFDocument:
    """Same small page, pages kept in memory until flushed."""
    return PDFDocument(page_size=(400, 300), margins=20, buffer_pages=True, settings=test_settings)


@pytest.fixture
def a4_doc(test_settings) -> PDFDocument:
    """Default A4 page with 72pt margins."""
    return PDFDocument(settings=test_settings)


@pytest.fixture
def long_text() -> str:
    return " ".join(
        f"Sentence number {i} keeps the paragraph going so that it wraps many times."
        for i in range(60)
    )
