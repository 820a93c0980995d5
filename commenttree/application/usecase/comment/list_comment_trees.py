"""List top-level comment trees use case."""

from typing import Any

from pydantic import BaseModel, field_validator

from commenttree.application.usecase.base import BaseUseCase
from commenttree.domain.service import CommentService
from commenttree.domain.value import SortField, SortOrder

from .common import CommentTreeItem


class ListCommentTreesRequest(BaseModel):
    """List comment trees request.

    Page and limit are clamped by the service; unknown sort options fall
    back to created_at ascending instead of failing the request.
    """

    page: int = 1
    limit: int | None = None
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.ASC

    @field_validator("sort_by", mode="before")
    @classmethod
    def fallback_sort_by(cls, v: Any) -> Any:
        """Map unsupported sort columns to created_at."""
        if isinstance(v, str) and v.lower() in {f.value for f in SortField}:
            return v.lower()
        if isinstance(v, SortField):
            return v
        return SortField.CREATED_AT

    @field_validator("sort_order", mode="before")
    @classmethod
    def fallback_sort_order(cls, v: Any) -> Any:
        """Map unsupported sort directions to ascending."""
        if isinstance(v, str) and v.lower() in {o.value for o in SortOrder}:
            return v.lower()
        if isinstance(v, SortOrder):
            return v
        return SortOrder.ASC


class ListCommentTreesResponse(BaseModel):
    """List comment trees response."""

    comments: list[CommentTreeItem]
    total: int
    page: int
    limit: int
    skipped: list[int] = []  # Roots whose tree could not be built


class ListCommentTreesUseCase(BaseUseCase):
    """Use case for paginating top-level comments with their full trees."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comment trees use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: ListCommentTreesRequest
    ) -> ListCommentTreesResponse:
        """Execute list comment trees flow.

        Args:
            request: Pagination and sort options

        Returns:
            Page of trees plus the total number of top-level comments
        """
        result = await self.comment_service.list_top_level_trees(
            page=request.page,
            limit=request.limit,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
        )
        return ListCommentTreesResponse(
            comments=[CommentTreeItem.from_node(tree) for tree in result.trees],
            total=result.total,
            page=result.page,
            limit=result.limit,
            skipped=[failure.root_id for failure in result.failures],
        )
