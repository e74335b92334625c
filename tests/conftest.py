"""Shared fixtures for the extractor tests."""

import pytest
from bs4 import BeautifulSoup

from declutter.services.dom.soup import SoupNodeReader

# Exactly 120 characters of prose, no leading/trailing whitespace.
PROSE = ("The quick brown fox jumps over the lazy dog. " * 3)[:120]


@pytest.fixture
def parse():
    """Return a helper parsing an HTML fragment and handing back its first element."""
    def _parse(html: str):
        return BeautifulSoup(html, "html.parser").find()
    return _parse


@pytest.fixture
def reader():
    return SoupNodeReader()


@pytest.fixture
def prose():
    return PROSE
