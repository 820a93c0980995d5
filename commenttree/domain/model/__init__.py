"""Domain model entities for the comment store."""

from commenttree.domain.model.comment import Comment, CommentNode

__all__ = [
    "Comment",
    "CommentNode",
]
