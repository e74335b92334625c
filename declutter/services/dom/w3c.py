# declutter/services/dom/w3c.py
"""
Adapters for hosts exposing the W3C DOM names (``nodeType``, ``tagName``,
``getAttribute``, ``childNodes``, ``nodeValue``, ``createElement`` ...),
for example ``xml.dom.minidom`` documents.

Every accessor is read defensively: a host node that lacks one of them is
treated as carrying no data rather than raising.
"""

from typing import Any, List, Optional

from declutter.models import NodeKind

ELEMENT_NODE = 1
TEXT_NODE = 3
CDATA_SECTION_NODE = 4


class W3CNodeReader:
    """``NodeReader`` over W3C-style DOM nodes."""

    def node_kind(self, node: Any) -> Optional[NodeKind]:
        node_type = getattr(node, "nodeType", None)
        if node_type == ELEMENT_NODE:
            return NodeKind.ELEMENT
        if node_type == TEXT_NODE:
            return NodeKind.TEXT
        return None

    def tag_name(self, node: Any) -> str:
        value = getattr(node, "tagName", None)
        return value.lower() if isinstance(value, str) else ""

    def attribute(self, node: Any, name: str) -> str:
        getter = getattr(node, "getAttribute", None)
        if getter is None:
            return ""
        value = getter(name)
        return value if isinstance(value, str) else ""

    def class_name(self, node: Any) -> str:
        value = getattr(node, "className", None)
        if isinstance(value, str):
            return value
        return self.attribute(node, "class")

    def element_id(self, node: Any) -> str:
        value = getattr(node, "id", None)
        if isinstance(value, str):
            return value
        return self.attribute(node, "id")

    def children(self, node: Any) -> List[Any]:
        return list(getattr(node, "childNodes", None) or [])

    def node_value(self, node: Any) -> str:
        value = getattr(node, "nodeValue", None)
        return value if isinstance(value, str) else ""

    def text_content(self, node: Any) -> str:
        value = getattr(node, "textContent", None)
        if isinstance(value, str):
            return value

        parts: List[str] = []
        stack = [node]
        while stack:
            current = stack.pop()
            if getattr(current, "nodeType", None) in (TEXT_NODE, CDATA_SECTION_NODE):
                parts.append(self.node_value(current))
            else:
                stack.extend(reversed(self.children(current)))
        return "".join(parts)


class W3CDocumentFactory:
    """``DocumentFactory`` delegating to a W3C ``Document``."""

    def __init__(self, document: Any):
        self.document = document

    def create_element(self, tag_name: str) -> Any:
        return self.document.createElement(tag_name)

    def create_text_node(self, value: str) -> Any:
        return self.document.createTextNode(value)

    def set_attribute(self, element: Any, name: str, value: str) -> None:
        element.setAttribute(name, value)

    def append_child(self, parent: Any, child: Any) -> None:
        parent.appendChild(child)
