"""Search comments use case."""

from pydantic import BaseModel

from commenttree.application.usecase.base import BaseUseCase
from commenttree.domain.service import CommentService

from .common import CommentItem


class SearchCommentsRequest(BaseModel):
    """Search comments request."""

    query: str


class SearchCommentsResponse(BaseModel):
    """Search comments response."""

    comments: list[CommentItem]


class SearchCommentsUseCase(BaseUseCase):
    """Use case for substring search over comment text."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: SearchCommentsRequest) -> SearchCommentsResponse:
        """Execute search flow; matches are flat, without children."""
        comments = await self.comment_service.search_comments(request.query)
        return SearchCommentsResponse(
            comments=[CommentItem.from_domain(comment) for comment in comments]
        )
