"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from commenttree.domain.model.comment import Comment
from commenttree.domain.value import (
    CommentId,
    MaterializedPath,
    PathId,
    SortField,
    SortOrder,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise
    TransientStorageError once their retry budget is spent.
    """

    @abstractmethod
    async def insert(
        self,
        parent_id: Optional[CommentId],
        path_id: PathId,
        path: MaterializedPath,
        text: str,
        created_at: datetime,
    ) -> Comment:
        """Insert a new comment.

        Args:
            parent_id: Parent comment ID (None for top-level)
            path_id: Freshly generated path segment
            path: Full materialized path ending in path_id
            text: Comment text
            created_at: Creation timestamp

        Returns:
            The stored comment, with its storage-assigned ID

        Raises:
            ParentNotFoundError: If parent_id does not resolve
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_path(self, comment_id: CommentId) -> Optional[MaterializedPath]:
        """Find only the materialized path of a comment.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The path if the comment exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_path_prefix(self, prefix: MaterializedPath) -> List[Comment]:
        """Find a comment and all of its descendants.

        Args:
            prefix: Path of the subtree root

        Returns:
            Every comment whose path starts with prefix, ordered by
            (created_at, id)
        """
        pass

    @abstractmethod
    async def delete_by_path_prefix(self, prefix: MaterializedPath) -> int:
        """Delete a comment and all of its descendants.

        Deleting an already-absent subtree is a no-op.

        Args:
            prefix: Path of the subtree root

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count top-level comments."""
        pass

    @abstractmethod
    async def find_top_level(
        self,
        limit: int,
        offset: int,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> List[Comment]:
        """Find a page of top-level comments.

        Args:
            limit: Maximum number of comments to return
            offset: Number of comments to skip
            sort_by: Column to order by
            sort_order: Ascending or descending

        Returns:
            List of top-level comments
        """
        pass

    @abstractmethod
    async def search_text(self, substring: str, limit: int = 50) -> List[Comment]:
        """Case-insensitive substring search over comment text.

        Args:
            substring: Text to look for; wildcard characters match literally
            limit: Maximum number of comments to return

        Returns:
            Matching comments, newest first
        """
        pass
