# declutter/services/dom/interfaces.py
"""
Structural protocols describing the host DOM.

The extractor only reads the source tree through a ``NodeReader`` and only
builds output through a ``DocumentFactory``; any DOM implementation that can
be wrapped in these two interfaces can be decluttered.
"""

from typing import Any, List, Optional, Protocol

from declutter.models import NodeKind


class NodeReader(Protocol):
    """Read-only view over host nodes."""

    def node_kind(self, node: Any) -> Optional[NodeKind]:
        """Return the node's kind, or ``None`` for anything that is neither
        a text node nor an element (comments, doctypes, ...)."""
        ...

    def tag_name(self, node: Any) -> str:
        """Lower-case tag name of an element."""
        ...

    def attribute(self, node: Any, name: str) -> str:
        """Attribute value, ``""`` when absent."""
        ...

    def class_name(self, node: Any) -> str: ...

    def element_id(self, node: Any) -> str: ...

    def children(self, node: Any) -> List[Any]: ...

    def node_value(self, node: Any) -> str:
        """Raw, untrimmed value of a text node."""
        ...

    def text_content(self, node: Any) -> str:
        """Concatenated text of every descendant text node."""
        ...


class DocumentFactory(Protocol):
    """Builds the output tree."""

    def create_element(self, tag_name: str) -> Any: ...

    def create_text_node(self, value: str) -> Any: ...

    def set_attribute(self, element: Any, name: str, value: str) -> None: ...

    def append_child(self, parent: Any, child: Any) -> None: ...


REQUIRED_FACTORY_METHODS = (
    "create_element",
    "create_text_node",
    "set_attribute",
    "append_child",
)
