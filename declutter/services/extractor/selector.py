# declutter/services/extractor/selector.py
from declutter.models import MirrorNode


def select_top_candidate(root: MirrorNode) -> MirrorNode:
    """
    Return the node with the highest ``content_score`` in the whole tree.

    Nodes are compared in pre-order with a strict ``>``, so the root – or
    the earliest node found – wins ties.
    """
    top = root
    for node in root.iter_subtree():
        if node.content_score > top.content_score:
            top = node
    return top
