# declutter/services/extractor/formatter.py
"""Render an extracted BeautifulSoup container as HTML or markdown."""

import html2text
from bs4 import Tag


def _markdown_handler() -> html2text.HTML2Text:
    handler = html2text.HTML2Text()
    handler.ignore_links = False
    handler.ignore_images = False
    handler.ignore_tables = False
    handler.body_width = 0
    return handler


def render_html(container: Tag) -> str:
    return str(container)


def render_markdown(container: Tag) -> str:
    """Markdown for the extracted content, links and images preserved."""
    return _markdown_handler().handle(render_html(container))
