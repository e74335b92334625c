# declutter/services/extractor/reconstructor.py
"""
Reconstructor – turns the winning mirror subtree back into real DOM nodes
through the caller's ``DocumentFactory``.
"""

from typing import Any, List, Optional, Tuple

from declutter.exceptions import UnsupportedNodeKindError
from declutter.models import MirrorNode, NodeKind
from declutter.services.dom.interfaces import DocumentFactory


def _create(node: MirrorNode, factory: DocumentFactory) -> Optional[Any]:
    """Build the DOM node for ``node`` alone (children are handled by the caller)."""
    if node.placeholder:
        return None

    if node.kind is NodeKind.TEXT:
        return factory.create_text_node(node.text)

    if node.kind is NodeKind.ELEMENT:
        element = factory.create_element(node.tag_name)
        if node.tag_name == "a":
            factory.set_attribute(element, "href", node.attributes.get("href") or "")
        elif node.tag_name == "img":
            factory.set_attribute(element, "src", node.attributes.get("src") or "")
            factory.set_attribute(element, "alt", node.attributes.get("alt") or "")
        elif node.tag_name == "pre":
            # Raw payload goes in as literal text – never re-parsed as markup.
            factory.append_child(element, factory.create_text_node(node.text))
        return element

    raise UnsupportedNodeKindError(node.kind)


def materialize(node: MirrorNode, factory: DocumentFactory) -> Optional[Any]:
    """
    Rebuild ``node`` and its kept descendants as new DOM nodes.

    Returns ``None`` when the node itself materializes to nothing (the
    placeholder left behind by a rejected root).
    """
    root = _create(node, factory)
    if root is None:
        return None

    stack: List[Tuple[MirrorNode, Any]] = [(node, root)]
    while stack:
        mirror, element = stack.pop()
        if mirror.kind is not NodeKind.ELEMENT or mirror.tag_name in ("pre", "img"):
            continue
        for child in mirror.children:
            built = _create(child, factory)
            if built is None:
                continue
            factory.append_child(element, built)
            stack.append((child, built))
    return root


def wrap_in_container(
    node: MirrorNode, factory: DocumentFactory, container_tag: str = "div"
) -> Any:
    """Materialize ``node`` inside a fresh container element."""
    container = factory.create_element(container_tag)
    content = materialize(node, factory)
    if content is not None:
        factory.append_child(container, content)
    return container
