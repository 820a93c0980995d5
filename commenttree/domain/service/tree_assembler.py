"""Rebuilds comment trees from flat subtree reads."""

from collections.abc import Iterable

from commenttree.domain.model import Comment, CommentNode
from commenttree.domain.value import CommentId


def assemble_tree(root: Comment, records: Iterable[Comment]) -> CommentNode:
    """Link a flat set of comments into the tree under root.

    records is one comment and its descendants, as returned by a path-prefix
    read, in any order. Two passes: index every record by id, then attach
    each record to its parent when the parent is part of the set. Records
    whose parent lies outside the set (the root itself, or inconsistent
    data) are left unattached.

    Siblings keep the order in which they appear in records, so a
    deterministic order must be requested from storage.

    Args:
        root: The comment the subtree was read for
        records: Flat subtree, typically including root

    Returns:
        Node for root with children populated. When root is missing from
        records, a node for the fetched root with no children.
    """
    nodes: dict[CommentId, CommentNode] = {}
    ordered: list[CommentNode] = []
    for comment in records:
        node = CommentNode(comment=comment, children=[])
        nodes[comment.id] = node
        ordered.append(node)

    for node in ordered:
        parent_id = node.comment.parent_id
        if parent_id is None or node.id == root.id:
            continue
        parent = nodes.get(parent_id)
        if parent is not None:
            parent.children.append(node)

    return nodes.get(root.id) or CommentNode(comment=root, children=[])
