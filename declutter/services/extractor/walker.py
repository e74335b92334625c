# declutter/services/extractor/walker.py
"""
Filtering walker.

Walks the source DOM depth-first and builds the ``MirrorNode`` tree for
everything worth keeping.  Scores are accumulated bottom-up: a parent's
score is finalized only after all of its children have been processed.

The traversal keeps its own stack of frames instead of recursing, so the
depth of the input document is bounded by memory, not by the interpreter's
recursion limit.
"""

from typing import Any, Iterator, List, Optional

from loguru import logger

from declutter.models import MirrorNode, NodeKind
from declutter.services.dom.interfaces import NodeReader

from .classifiers import (
    BLOCK_PENALTY,
    BLOCK_TAGS,
    IMAGE_BONUS,
    LIST_PENALTY,
    LIST_TAGS,
    NON_POSITIVE_CHILD_PENALTY,
    attribute_weight,
    is_embedded_or_empty_image_source,
    is_non_content_tag,
    is_unlikely_candidate,
    tag_weight,
    text_score,
)

# Element attributes carried through to reconstruction.
_KEPT_ATTRIBUTES = {
    "a": ("href",),
    "img": ("src", "alt"),
}

# Marks an exhausted child iterator; host child lists may contain None.
_DONE = object()


class _Frame:
    """An element whose children are still being visited."""

    __slots__ = ("node", "pending")

    def __init__(self, node: MirrorNode, pending: Iterator[Any]):
        self.node = node
        self.pending = pending


class FilteringWalker:
    """Builds the scored mirror tree for one source document."""

    def __init__(self, reader: NodeReader):
        self.reader = reader
        self.kept = 0
        self.rejected = 0

    # ------------------------------------------------------------------
    #  Public API
    # ------------------------------------------------------------------
    def build(self, root: Any) -> MirrorNode:
        """
        Return the mirror tree rooted at ``root``.

        A rejected root still yields a zero-scored placeholder frame so the
        later phases always have a node to work on.
        """
        mirror = self._open(root)
        if mirror is None:
            logger.debug("Root node rejected by filter – using empty placeholder")
            return MirrorNode(source=root, kind=NodeKind.ELEMENT, placeholder=True)

        if not self._needs_children(mirror):
            self._finalize(mirror)
            return mirror

        stack: List[_Frame] = [_Frame(mirror, iter(self.reader.children(root)))]
        while stack:
            frame = stack[-1]
            child_source = next(frame.pending, _DONE)

            if child_source is _DONE:
                # Every child seen: the frame's score is now final.
                stack.pop()
                self._finalize(frame.node)
                if stack:
                    self._absorb(stack[-1].node, frame.node)
                continue

            child = self._open(child_source)
            if child is None:
                continue

            if self._needs_children(child):
                stack.append(_Frame(child, iter(self.reader.children(child_source))))
            else:
                self._finalize(child)
                self._absorb(frame.node, child)

        return mirror

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------
    def _open(self, node: Any) -> Optional[MirrorNode]:
        """Apply the rejection rules and create a mirror for a kept node."""
        kind = self.reader.node_kind(node)

        if kind is NodeKind.TEXT:
            value = self.reader.node_value(node)
            if not value.strip():
                return None
            self.kept += 1
            return MirrorNode(source=node, kind=NodeKind.TEXT, text=value)

        if kind is not NodeKind.ELEMENT:
            self.rejected += 1
            return None

        tag = self.reader.tag_name(node)
        class_name = self.reader.class_name(node)
        element_id = self.reader.element_id(node)

        if is_unlikely_candidate(class_name, element_id):
            logger.trace(f"Dropping unlikely candidate <{tag} class='{class_name}' id='{element_id}'>")
            self.rejected += 1
            return None

        if is_non_content_tag(tag):
            logger.trace(f"Dropping non-content <{tag}>")
            self.rejected += 1
            return None

        if tag == "img" and is_embedded_or_empty_image_source(self.reader.attribute(node, "src")):
            logger.trace("Dropping image without usable src")
            self.rejected += 1
            return None

        mirror = MirrorNode(
            source=node,
            kind=NodeKind.ELEMENT,
            tag_name=tag,
            class_name=class_name,
            element_id=element_id,
            attributes={
                name: self.reader.attribute(node, name)
                for name in _KEPT_ATTRIBUTES.get(tag, ())
            },
        )
        if tag == "pre":
            # Preformatted content is kept verbatim as one opaque payload.
            mirror.text = self.reader.text_content(node)
        self.kept += 1
        return mirror

    @staticmethod
    def _needs_children(mirror: MirrorNode) -> bool:
        return mirror.kind is NodeKind.ELEMENT and mirror.tag_name not in ("pre", "img")

    @staticmethod
    def _finalize(mirror: MirrorNode) -> None:
        """Add the node's own contribution on top of what its children gave it."""
        if mirror.kind is NodeKind.TEXT:
            mirror.content_score = text_score(len(mirror.text.strip()))
            return

        tag = mirror.tag_name
        if tag == "pre":
            payload = mirror.text.strip()
            if payload:
                mirror.content_score += text_score(len(payload))

        mirror.content_score += tag_weight(tag)
        mirror.content_score += attribute_weight(mirror.class_name)
        mirror.content_score += attribute_weight(mirror.element_id)

        if tag in BLOCK_TAGS:
            mirror.is_block = True
            mirror.content_score -= BLOCK_PENALTY
        elif tag in LIST_TAGS:
            mirror.content_score -= LIST_PENALTY
        elif tag == "img":
            mirror.content_score += IMAGE_BONUS

    @staticmethod
    def _absorb(parent: MirrorNode, child: MirrorNode) -> None:
        """Attach a finalized child, or charge its parent a penalty."""
        if child.content_score > 0:
            # Anchor text never inflates its container.
            if not child.is_tag("a"):
                parent.content_score += child.content_score
            parent.append_child(child)
        else:
            parent.content_score -= NON_POSITIVE_CHILD_PENALTY


def build_mirror(root: Any, reader: NodeReader) -> MirrorNode:
    """Convenience wrapper around ``FilteringWalker(reader).build(root)``."""
    return FilteringWalker(reader).build(root)
