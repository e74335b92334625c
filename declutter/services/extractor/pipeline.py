# declutter/services/extractor/pipeline.py
"""
Extraction pipeline: filter → score → select → reconstruct.

Each call owns its mirror tree; nothing is cached or shared between calls.
"""

import time
from typing import Any, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from loguru import logger

from declutter.exceptions import DocumentFactoryError
from declutter.models import ExtractionConfig, ExtractionPhase
from declutter.services.dom.interfaces import (
    REQUIRED_FACTORY_METHODS,
    DocumentFactory,
    NodeReader,
)
from declutter.services.dom.soup import SoupDocumentFactory, SoupNodeReader
from declutter.services.dom.w3c import W3CDocumentFactory, W3CNodeReader

from .instrumentation import PhaseHook
from .reconstructor import wrap_in_container
from .scoring import apply_strategy
from .selector import select_top_candidate
from .walker import FilteringWalker


def _resolve_factory(factory: Any) -> DocumentFactory:
    """
    Accept a ready ``DocumentFactory``, a ``BeautifulSoup`` document or any
    W3C ``Document`` exposing ``createElement`` / ``createTextNode``.
    """
    if all(callable(getattr(factory, name, None)) for name in REQUIRED_FACTORY_METHODS):
        return factory
    if isinstance(factory, BeautifulSoup):
        return SoupDocumentFactory(factory)
    if callable(getattr(factory, "createElement", None)) and callable(
        getattr(factory, "createTextNode", None)
    ):
        return W3CDocumentFactory(factory)
    missing = [name for name in REQUIRED_FACTORY_METHODS if not callable(getattr(factory, name, None))]
    raise DocumentFactoryError(missing)


def _default_reader(root: Any) -> NodeReader:
    """Pick an adapter from the root's shape: bs4 objects or W3C-style nodes."""
    if isinstance(root, (Tag, NavigableString)):
        return SoupNodeReader()
    return W3CNodeReader()


def extract(
    root: Any,
    factory: DocumentFactory,
    *,
    reader: Optional[NodeReader] = None,
    config: Optional[ExtractionConfig] = None,
    hook: Optional[PhaseHook] = None,
) -> Any:
    """
    Extract the main content below ``root``.

    Parameters
    ----------
    root:
        Host DOM node to declutter.  Never mutated.
    factory:
        ``DocumentFactory`` used to build the output nodes, or a host
        document (``BeautifulSoup`` or W3C ``Document``) to wrap in one.
    reader:
        ``NodeReader`` for the host DOM; guessed from ``root`` when omitted.
    config:
        ``ExtractionConfig``; defaults to uniform scoring in a ``div``.
    hook:
        Optional ``hook(phase, elapsed_seconds)`` called after filtering,
        selection and reconstruction.

    Returns
    -------
    A new container element whose only child is the reconstructed top
    candidate, or an empty container when nothing survived filtering.

    Raises
    ------
    DocumentFactoryError
        If ``factory`` is neither a ``DocumentFactory`` nor a host document.
    """
    factory = _resolve_factory(factory)
    config = config or ExtractionConfig()
    reader = reader or _default_reader(root)

    def _report(phase: ExtractionPhase, started: float) -> float:
        now = time.perf_counter()
        if hook is not None:
            hook(phase, now - started)
        return now

    started = time.perf_counter()

    # ------------------------------------------------------------------
    # 1️⃣ Filter the source tree into a scored mirror tree
    # ------------------------------------------------------------------
    walker = FilteringWalker(reader)
    mirror = walker.build(root)
    apply_strategy(mirror, config.strategy)
    logger.debug(
        f"Filtered tree: {walker.kept} node(s) kept, {walker.rejected} rejected "
        f"(strategy={config.strategy.value})"
    )
    started = _report(ExtractionPhase.FILTER, started)

    # ------------------------------------------------------------------
    # 2️⃣ Pick the single best-scoring node
    # ------------------------------------------------------------------
    top = select_top_candidate(mirror)
    logger.debug(f"Top candidate: <{top.tag_name or '#text'}> score={top.content_score}")
    started = _report(ExtractionPhase.SELECT, started)

    # ------------------------------------------------------------------
    # 3️⃣ Rebuild it as real DOM inside a fresh container
    # ------------------------------------------------------------------
    container = wrap_in_container(top, factory, config.container_tag)
    _report(ExtractionPhase.RECONSTRUCT, started)

    return container


def extract_soup(
    root: Tag,
    *,
    config: Optional[ExtractionConfig] = None,
    hook: Optional[PhaseHook] = None,
) -> Tag:
    """``extract`` for BeautifulSoup trees, building output in a new soup."""
    return extract(
        root,
        SoupDocumentFactory(),
        reader=SoupNodeReader(),
        config=config,
        hook=hook,
    )
