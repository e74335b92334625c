# declutter/services/dom/soup.py
"""
BeautifulSoup adapters.

``SoupNodeReader`` reads a parsed ``bs4`` tree, ``SoupDocumentFactory``
builds the extracted output inside a fresh, empty ``BeautifulSoup``
document.
"""

from typing import Any, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from declutter.models import NodeKind


class SoupNodeReader:
    """``NodeReader`` over ``bs4`` ``Tag`` / ``NavigableString`` objects."""

    def node_kind(self, node: Any) -> Optional[NodeKind]:
        # Comments, doctypes, CDATA and processing instructions are all
        # PreformattedString subclasses – none of them is content.
        if isinstance(node, PreformattedString):
            return None
        if isinstance(node, NavigableString):
            return NodeKind.TEXT
        if isinstance(node, Tag):
            return NodeKind.ELEMENT
        return None

    def tag_name(self, node: Any) -> str:
        # A whole document handed in as root is read as a generic container.
        if isinstance(node, BeautifulSoup):
            return "div"
        return (getattr(node, "name", None) or "").lower()

    def attribute(self, node: Any, name: str) -> str:
        attrs = getattr(node, "attrs", None) or {}
        value = attrs.get(name)
        if value is None:
            return ""
        # bs4 returns multi-valued attributes (class, rel, ...) as lists
        if isinstance(value, (list, tuple)):
            return " ".join(str(v) for v in value)
        return str(value)

    def class_name(self, node: Any) -> str:
        return self.attribute(node, "class")

    def element_id(self, node: Any) -> str:
        return self.attribute(node, "id")

    def children(self, node: Any) -> List[Any]:
        return list(getattr(node, "contents", None) or [])

    def node_value(self, node: Any) -> str:
        return str(node) if isinstance(node, NavigableString) else ""

    def text_content(self, node: Any) -> str:
        if isinstance(node, Tag):
            return node.get_text()
        return self.node_value(node)


class SoupDocumentFactory:
    """``DocumentFactory`` producing ``bs4`` nodes."""

    def __init__(self, soup: Optional[BeautifulSoup] = None):
        self.soup = soup if soup is not None else BeautifulSoup("", "html.parser")

    def create_element(self, tag_name: str) -> Tag:
        return self.soup.new_tag(tag_name)

    def create_text_node(self, value: str) -> NavigableString:
        return self.soup.new_string(value)

    def set_attribute(self, element: Tag, name: str, value: str) -> None:
        element[name] = value

    def append_child(self, parent: Tag, child: Any) -> None:
        parent.append(child)
