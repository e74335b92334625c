# declutter/exceptions.py
"""Error taxonomy for the extractor.

Heuristic degeneracies (empty documents, rejected roots, odd host nodes)
never raise; these exceptions cover caller and programming errors only.
"""


class DeclutterError(Exception):
    """Base class for every error raised by the package."""


class DocumentFactoryError(DeclutterError, TypeError):
    """Raised when the supplied document factory cannot build output nodes."""

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Document factory is missing required method(s): {', '.join(missing)}"
        )
        self.missing = missing


class UnsupportedNodeKindError(DeclutterError, ValueError):
    """Raised when a mirror node carries a kind outside ``NodeKind``."""

    def __init__(self, kind):
        super().__init__(f"Unsupported mirror node kind: {kind!r}")
        self.kind = kind
