# declutter/models/mirror_node.py
"""
Lightweight mirror of the source DOM.

Only nodes that survive filtering get a ``MirrorNode``.  The tree is built
and scored by the filtering walker and is thrown away once the output DOM
has been reconstructed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


# ----------------------------------------------------------------------
#  Closed node variant – the only two kinds the extractor understands
# ----------------------------------------------------------------------
class NodeKind(str, Enum):
    TEXT = "text"
    ELEMENT = "element"


@dataclass(eq=False)
class MirrorNode:
    """
    One kept node of the filtered tree.

    ``source`` is an opaque reference to the host node and is never mutated.
    ``text`` holds the raw (untrimmed) value of a text node, or the captured
    payload of a ``pre`` element.  ``attributes`` keeps the small attribute
    subset that survives reconstruction (``href`` / ``src`` / ``alt``).
    """

    source: Any
    kind: NodeKind
    tag_name: str = ""
    text: str = ""
    class_name: str = ""
    element_id: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["MirrorNode"] = field(default_factory=list, repr=False)
    parent: Optional["MirrorNode"] = field(default=None, repr=False)
    content_score: float = 0
    is_block: bool = False
    placeholder: bool = False

    # ------------------------------------------------------------------
    def append_child(self, child: "MirrorNode") -> None:
        self.children.append(child)
        child.parent = self

    def is_tag(self, *names: str) -> bool:
        """True when this is an element whose tag is one of ``names``."""
        return self.kind is NodeKind.ELEMENT and self.tag_name in names

    def iter_subtree(self) -> Iterator["MirrorNode"]:
        """Pre-order walk over this node and its descendants (no recursion)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
