"""Create comment use case."""

from pydantic import BaseModel

from commenttree.application.usecase.base import BaseUseCase
from commenttree.domain.service import CommentService
from commenttree.domain.value import CommentId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    text: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a top-level comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If text is blank or parent_id is negative
            ParentNotFoundError: If parent comment doesn't exist
        """
        parent_id = (
            CommentId(request.parent_id) if request.parent_id is not None else None
        )
        comment = await self.comment_service.create_comment(
            text=request.text,
            parent_id=parent_id,
        )
        return CreateCommentResponse.from_domain(comment)
