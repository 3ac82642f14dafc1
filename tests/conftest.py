"""Pytest configuration and shared fixtures."""

import sys
import pytest
from pathlib import Path
from lxml import etree, html

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from xpath_assert.config import reset_config  # noqa: E402


# ============================================================================
# Configuration
# ============================================================================

_CONFIG_VARIABLES = (
    "XPATH_ASSERT_REPR_LENGTH",
    "XPATH_ASSERT_NORMALIZE_WHITESPACE",
    "XPATH_ASSERT_LOG_LEVEL",
    "XPATH_ASSERT_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against default configuration."""
    for name in _CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# ============================================================================
# Document Fixtures
# ============================================================================

XML_SOURCE = '<root><child/><x:child xmlns:x="urn:dummy"/></root>'


def parse_xml(source: str = XML_SOURCE):
    """Parse XML into a fresh document (tree)."""
    return etree.ElementTree(etree.fromstring(source))


@pytest.fixture
def xml_document():
    """Document with one plain child and one child in the urn:dummy namespace."""
    return parse_xml()


@pytest.fixture
def other_xml_document():
    """A second, independently parsed copy of xml_document."""
    return parse_xml()


@pytest.fixture
def namespaced_document():
    """Document using a default namespace plus a prefixed one."""
    return parse_xml(
        '<feed xmlns="urn:feed" xmlns:m="urn:meta">'
        '<entry id="1"><title>First</title><m:rating>5</m:rating></entry>'
        '<entry id="2"><title>Second</title><m:rating>3</m:rating></entry>'
        '</feed>'
    )


@pytest.fixture
def html_document():
    """Small HTML page parsed with lxml.html."""
    return html.fromstring("""
    <html>
    <head><title>Test Page</title></head>
    <body>
        <h1 class="title">Hello World</h1>
        <ul class="items">
            <li>Item 1</li>
            <li>Item 2</li>
            <li>Item 3</li>
        </ul>
        <a href="https://example.com">Link</a>
    </body>
    </html>
    """)
