"""Extract the main content of an HTML document, dropping the clutter around it."""

from .exceptions import DeclutterError, DocumentFactoryError, UnsupportedNodeKindError
from .models import ExtractionConfig, ExtractionPhase, ScoringStrategy
from .services.extractor import extract, extract_soup, render_markdown

__all__ = [
    'DeclutterError',
    'DocumentFactoryError',
    'UnsupportedNodeKindError',
    'ExtractionConfig',
    'ExtractionPhase',
    'ScoringStrategy',
    'extract',
    'extract_soup',
    'render_markdown',
]
