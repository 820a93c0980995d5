"""Get comment tree use case."""

from pydantic import BaseModel

from commenttree.application.usecase.base import BaseUseCase
from commenttree.domain.service import CommentService
from commenttree.domain.value import CommentId

from .common import CommentTreeItem


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    comment_id: int


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    comments: CommentTreeItem


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for reading one comment with all of its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Request with the root comment ID

        Returns:
            Root comment with children nested recursively

        Raises:
            NotFoundError: If comment doesn't exist
        """
        tree = await self.comment_service.get_comment_tree(
            CommentId(request.comment_id)
        )
        return GetCommentTreeResponse(comments=CommentTreeItem.from_node(tree))
