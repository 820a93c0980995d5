"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from commenttree.domain.model import Comment
from commenttree.domain.value import CommentId, MaterializedPath, PathId

# Keep telemetry local; services still emit spans and logs through it
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_comment(
    comment_id: int,
    parent: Comment | None = None,
    text: str | None = None,
    minutes: int | None = None,
) -> Comment:
    """Build a comment whose path extends its parent's path.

    Args:
        comment_id: Storage id to assign
        parent: Parent comment (None for top-level)
        text: Comment text (defaults to "comment <id>")
        minutes: Offset from BASE_TIME for created_at (defaults to the id)

    Returns:
        Comment with a fresh path_id
    """
    offset = comment_id if minutes is None else minutes
    path_id = PathId(uuid4())
    if parent is None:
        path = MaterializedPath.for_root(path_id)
    else:
        path = parent.path.child(path_id)

    return Comment(
        id=CommentId(comment_id),
        parent_id=parent.id if parent else None,
        path_id=path_id,
        path=path,
        text=text or f"comment {comment_id}",
        created_at=BASE_TIME + timedelta(minutes=offset),
    )
