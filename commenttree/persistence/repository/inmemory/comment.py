"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from commenttree.domain.error import ParentNotFoundError
from commenttree.domain.model import Comment
from commenttree.domain.repository.comment import CommentRepository
from commenttree.domain.value import (
    CommentId,
    MaterializedPath,
    PathId,
    SortField,
    SortOrder,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the PostgreSQL schema: sequential ids, a parent foreign key,
    unique path_id with insert deduplication, and prefix deletes.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._last_id = 0

    async def insert(
        self,
        parent_id: Optional[CommentId],
        path_id: PathId,
        path: MaterializedPath,
        text: str,
        created_at: datetime,
    ) -> Comment:
        """Insert a comment, returning the existing row for a reused path_id."""
        if parent_id is not None and parent_id not in self._comments:
            raise ParentNotFoundError(parent_id)

        for existing in self._comments.values():
            if existing.path_id == path_id:
                return existing

        comment = Comment(
            id=CommentId(self._last_id + 1),
            parent_id=parent_id,
            path_id=path_id,
            path=path,
            text=text,
            created_at=created_at,
        )
        self._comments[comment.id] = comment
        self._last_id = comment.id
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Store a fully built comment as-is (test seeding helper)."""
        self._comments[comment.id] = comment
        self._last_id = max(self._last_id, comment.id)
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_path(self, comment_id: CommentId) -> Optional[MaterializedPath]:
        """Find only the path of a comment."""
        comment = self._comments.get(comment_id)
        return comment.path if comment else None

    async def find_by_path_prefix(self, prefix: MaterializedPath) -> list[Comment]:
        """Find a comment and all of its descendants."""
        comments = [c for c in self._comments.values() if prefix.contains(c.path)]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def delete_by_path_prefix(self, prefix: MaterializedPath) -> int:
        """Delete a comment and all of its descendants."""
        doomed = [cid for cid, c in self._comments.items() if prefix.contains(c.path)]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def count_top_level(self) -> int:
        """Count top-level comments."""
        return sum(1 for c in self._comments.values() if c.parent_id is None)

    async def find_top_level(
        self,
        limit: int,
        offset: int,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> list[Comment]:
        """Find a page of top-level comments."""
        roots = [c for c in self._comments.values() if c.parent_id is None]

        if sort_by == SortField.ID:
            roots.sort(key=lambda c: c.id)
        else:
            roots.sort(key=lambda c: (c.created_at, c.id))
        if sort_order == SortOrder.DESC:
            roots.reverse()

        # Paginate
        return roots[offset : offset + limit]

    async def search_text(self, substring: str, limit: int = 50) -> list[Comment]:
        """Case-insensitive substring search, newest first."""
        needle = substring.lower()
        matches = [c for c in self._comments.values() if needle in c.text.lower()]
        matches.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return matches[:limit]
