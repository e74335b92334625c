from .interfaces import DocumentFactory, NodeReader
from .soup import SoupDocumentFactory, SoupNodeReader
from .w3c import W3CDocumentFactory, W3CNodeReader

__all__ = [
    'DocumentFactory',
    'NodeReader',
    'SoupDocumentFactory',
    'SoupNodeReader',
    'W3CDocumentFactory',
    'W3CNodeReader',
]
