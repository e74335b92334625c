# declutter/services/extractor/scoring.py
"""
Scoring strategies.

``UNIFORM`` keeps the scores the filtering walker accumulated while building
the mirror tree.  ``PARAGRAPH`` discards them and rescores the (already
pruned) tree the readability way: only paragraph-like nodes generate score,
which flows to their parent and, at half weight, their grandparent; every
candidate is then scaled by ``1 - link density``.
"""

from typing import Dict, List, Optional, Tuple

from loguru import logger

from declutter.models import MirrorNode, NodeKind, ScoringStrategy

from .classifiers import PARAGRAPH_TAGS, attribute_weight, tag_weight

MIN_PARAGRAPH_LENGTH = 25
MAX_LENGTH_BONUS = 3


def inner_text(node: MirrorNode) -> str:
    """Text of every kept text node below ``node`` (``pre`` payloads included)."""
    parts: List[str] = []
    for current in node.iter_subtree():
        if current.kind is NodeKind.TEXT or current.is_tag("pre"):
            parts.append(current.text)
    return "".join(parts)


def _text_lengths(root: MirrorNode) -> Dict[int, Tuple[int, int]]:
    """
    Map ``id(node)`` → ``(text length, text length inside anchors)`` for the
    whole tree, computed in a single post-order pass.
    """
    lengths: Dict[int, Tuple[int, int]] = {}
    order = list(root.iter_subtree())
    for node in reversed(order):  # children before parents
        if node.kind is NodeKind.TEXT or node.is_tag("pre"):
            total = len(node.text.strip())
            linked = 0
        else:
            total = sum(lengths[id(c)][0] for c in node.children)
            linked = sum(lengths[id(c)][1] for c in node.children)
        if node.is_tag("a"):
            linked = total
        lengths[id(node)] = (total, linked)
    return lengths


def link_density(
    node: MirrorNode, lengths: Optional[Dict[int, Tuple[int, int]]] = None
) -> float:
    """
    Share of ``node``'s text that sits inside hyperlinks (0 for no text).

    ``lengths`` is a precomputed ``_text_lengths`` map covering ``node``.
    """
    if lengths is None:
        lengths = _text_lengths(node)
    total, linked = lengths[id(node)]
    return linked / total if total else 0.0


def paragraph_delta(text: str) -> float:
    """Score a paragraph hands to its ancestors, 0 when it is too short."""
    text = text.strip()
    if len(text) < MIN_PARAGRAPH_LENGTH:
        return 0
    return 1 + text.count(",") + min(len(text) // 100, MAX_LENGTH_BONUS)


def _initial_candidate_score(node: MirrorNode) -> float:
    return (
        tag_weight(node.tag_name)
        + attribute_weight(node.class_name)
        + attribute_weight(node.element_id)
    )


def rescore_paragraphs(root: MirrorNode) -> int:
    """
    Replace every score in the tree with the paragraph-strategy score.

    Returns the number of candidates that received score.
    """
    nodes = list(root.iter_subtree())
    for node in nodes:
        node.content_score = 0

    candidates: Dict[int, MirrorNode] = {}

    def _credit(candidate: MirrorNode, amount: float) -> None:
        if id(candidate) not in candidates:
            candidates[id(candidate)] = candidate
            candidate.content_score = _initial_candidate_score(candidate)
        candidate.content_score += amount

    for node in nodes:
        if node.kind is not NodeKind.ELEMENT or node.tag_name not in PARAGRAPH_TAGS:
            continue
        delta = paragraph_delta(inner_text(node))
        if not delta or node.parent is None:
            continue
        _credit(node.parent, delta)
        if node.parent.parent is not None:
            _credit(node.parent.parent, delta / 2)

    lengths = _text_lengths(root)
    for candidate in candidates.values():
        candidate.content_score *= 1 - link_density(candidate, lengths)

    logger.debug(f"Paragraph scoring produced {len(candidates)} candidate(s)")
    return len(candidates)


def apply_strategy(root: MirrorNode, strategy: ScoringStrategy) -> None:
    """Finalize scores for ``strategy`` (no-op for the uniform walk scores)."""
    if strategy is ScoringStrategy.PARAGRAPH:
        rescore_paragraphs(root)
