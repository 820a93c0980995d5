"""Delete comment tree use case."""

from pydantic import BaseModel

from commenttree.application.usecase.base import BaseUseCase
from commenttree.domain.service import CommentService
from commenttree.domain.value import CommentId


class DeleteCommentTreeRequest(BaseModel):
    """Delete comment tree request."""

    comment_id: int


class DeleteCommentTreeResponse(BaseModel):
    """Delete comment tree response."""

    id: int
    removed: int  # Root plus descendants


class DeleteCommentTreeUseCase(BaseUseCase):
    """Use case for deleting a comment together with all of its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: DeleteCommentTreeRequest
    ) -> DeleteCommentTreeResponse:
        """Execute delete comment tree flow.

        Raises:
            NotFoundError: If comment doesn't exist
        """
        removed = await self.comment_service.delete_comment_tree(
            CommentId(request.comment_id)
        )
        return DeleteCommentTreeResponse(id=request.comment_id, removed=removed)
