"""Mappers for converting between database rows and domain models.

Since the domain models are immutable Pydantic models, rows are mapped by
hand instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from commenttree.domain.model import Comment
from commenttree.domain.value import CommentId, MaterializedPath, PathId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        path_id=PathId(
            UUID(row["path_id"]) if isinstance(row["path_id"], str) else row["path_id"]
        ),
        path=MaterializedPath(row["path"]),
        text=row["comment"],
        created_at=row["created_at"],
    )
