"""Wire models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from commenttree.domain.model import Comment, CommentNode


class CommentItem(BaseModel):
    """Comment as exposed to clients. The materialized path stays internal."""

    id: int
    parent_id: int | None
    path_id: str
    comment: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        """Convert domain Comment to response model."""
        return cls(
            id=comment.id,
            parent_id=comment.parent_id,
            path_id=str(comment.path_id),
            comment=comment.text,
            created_at=comment.created_at,
        )


class CommentTreeItem(CommentItem):
    """Comment with its replies nested recursively."""

    children: list["CommentTreeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentTreeItem":
        """Convert domain CommentNode to response model.

        Args:
            node: Assembled tree node

        Returns:
            Response model with children recursively converted
        """
        comment = node.comment
        return cls(
            id=comment.id,
            parent_id=comment.parent_id,
            path_id=str(comment.path_id),
            comment=comment.text,
            created_at=comment.created_at,
            children=[cls.from_node(child) for child in node.children],
        )
