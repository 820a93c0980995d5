"""Comment domain service."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

import logfire

from commenttree.config import CommentSettings
from commenttree.domain.error import (
    NotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from commenttree.domain.model import Comment, CommentNode
from commenttree.domain.repository import CommentRepository
from commenttree.domain.value import CommentId, SortField, SortOrder

from .base import Service
from .path_encoder import PathEncoder
from .tree_assembler import assemble_tree


@dataclass(frozen=True)
class TreeAssemblyFailure:
    """A top-level comment whose tree could not be built for a page.

    The comment itself is untouched in storage; it is only missing from
    the listing.
    """

    root_id: CommentId
    error: str


TreeResult = Union[CommentNode, TreeAssemblyFailure]


@dataclass
class CommentTreePage:
    """One page of fully assembled top-level comment trees."""

    trees: list[CommentNode]
    total: int
    page: int
    limit: int
    failures: list[TreeAssemblyFailure] = field(default_factory=list)


class CommentService(Service):
    """Domain service for comment tree operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        settings: CommentSettings,
        log: Optional[logfire.Logfire] = None,
        path_encoder: Optional[PathEncoder] = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Page size and search limits
            log: Logfire handle (defaults to the global instance)
            path_encoder: Path builder (defaults to UUID4 segments)
        """
        self.comment_repository = comment_repository
        self.settings = settings
        self.log = log or logfire.DEFAULT_LOGFIRE_INSTANCE
        self.path_encoder = path_encoder or PathEncoder()

    async def create_comment(
        self, text: str, parent_id: CommentId | None = None
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            text: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with its storage-assigned ID and path

        Raises:
            ValidationError: If text is blank or parent_id is negative
            ParentNotFoundError: If parent comment doesn't exist (nothing is written)
        """
        with self.log.span(
            "comment_service.create_comment",
            parent_id=parent_id,
            text_length=len(text),
        ):
            if not text.strip():
                raise ValidationError("Comment text is required")

            parent_path = None
            if parent_id is not None:
                if parent_id < 0:
                    raise ValidationError("Parent ID can't be negative")
                parent_path = await self.comment_repository.find_path(parent_id)
                if parent_path is None:
                    self.log.warn(
                        "Parent comment not found on creation attempt",
                        parent_id=parent_id,
                    )
                    raise ParentNotFoundError(parent_id)

            path_id, path = self.path_encoder.encode(parent_path)
            saved = await self.comment_repository.insert(
                parent_id=parent_id,
                path_id=path_id,
                path=path,
                text=text,
                created_at=datetime.now(timezone.utc),
            )
            self.log.info(
                "Comment created",
                comment_id=saved.id,
                parent_id=parent_id,
                depth=path.depth,
            )
            return saved

    async def get_comment_tree(self, comment_id: CommentId) -> CommentNode:
        """Get a comment with its whole subtree.

        Two reads: the root, then every comment under the root's path.

        Args:
            comment_id: Root comment ID

        Returns:
            Root node with children populated recursively

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with self.log.span(
            "comment_service.get_comment_tree", comment_id=comment_id
        ):
            root = await self.comment_repository.find_by_id(comment_id)
            if root is None:
                self.log.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            records = await self.comment_repository.find_by_path_prefix(root.path)
            self.log.debug(
                "Fetched subtree", comment_id=comment_id, count=len(records)
            )
            return assemble_tree(root, records)

    async def delete_comment_tree(self, comment_id: CommentId) -> int:
        """Delete a comment and every descendant in one statement.

        Args:
            comment_id: Root comment ID

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If comment doesn't exist
        """
        with self.log.span(
            "comment_service.delete_comment_tree", comment_id=comment_id
        ):
            root = await self.comment_repository.find_by_id(comment_id)
            if root is None:
                self.log.warn("Comment not found for deletion", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            removed = await self.comment_repository.delete_by_path_prefix(root.path)
            self.log.info(
                "Comment tree deleted",
                comment_id=comment_id,
                path=root.path.root,
                removed=removed,
            )
            return removed

    async def list_top_level_trees(
        self,
        page: int = 1,
        limit: int | None = None,
        sort_by: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> CommentTreePage:
        """Get a page of top-level comments, each with its full subtree.

        A root whose tree fails to build is logged and left out of the page
        instead of failing the whole request.

        Args:
            page: 1-based page number (values below 1 become 1)
            limit: Page size (out-of-range values become the default)
            sort_by: Column to order roots by
            sort_order: Ascending or descending

        Returns:
            Trees for the page with the total number of top-level comments
        """
        if page < 1:
            page = 1
        if limit is None or limit < 1 or limit > self.settings.max_page_size:
            limit = self.settings.default_page_size
        offset = (page - 1) * limit

        with self.log.span(
            "comment_service.list_top_level_trees",
            page=page,
            limit=limit,
            sort_by=sort_by.value,
            sort_order=sort_order.value,
        ):
            total = await self.comment_repository.count_top_level()
            roots = await self.comment_repository.find_top_level(
                limit=limit,
                offset=offset,
                sort_by=sort_by,
                sort_order=sort_order,
            )

            result = CommentTreePage(trees=[], total=total, page=page, limit=limit)
            for root in roots:
                outcome = await self._build_tree_for_page(root.id)
                if isinstance(outcome, TreeAssemblyFailure):
                    result.failures.append(outcome)
                else:
                    result.trees.append(outcome)

            self.log.info(
                "Top-level trees listed",
                count=len(result.trees),
                skipped=len(result.failures),
                total=total,
            )
            return result

    async def _build_tree_for_page(self, root_id: CommentId) -> TreeResult:
        try:
            return await self.get_comment_tree(root_id)
        except Exception as e:
            self.log.error(
                "Failed to build tree for root comment",
                comment_id=root_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return TreeAssemblyFailure(root_id=root_id, error=str(e))

    async def search_comments(self, query: str) -> list[Comment]:
        """Find comments whose text contains query, ignoring case.

        Surrounding whitespace only counts against the minimum length; the
        query is matched as given.

        Args:
            query: Substring to look for

        Returns:
            Matches newest first, capped by settings. Queries shorter than
            the minimum length return an empty list.
        """
        with self.log.span("comment_service.search_comments", query=query):
            if len(query.strip()) < self.settings.min_search_length:
                self.log.debug("Search query too short", query=query)
                return []

            results = await self.comment_repository.search_text(
                query, limit=self.settings.max_search_results
            )
            self.log.info("Comments searched", query=query, count=len(results))
            return results
