"""Search routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from commenttree.application.usecase.comment import (
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
)
from commenttree.domain.error import TransientStorageError


router = APIRouter(tags=["search"], route_class=DishkaRoute)


@router.get("/search", response_model=SearchCommentsResponse)
async def search_comments(
    search_comments_use_case: FromDishka[SearchCommentsUseCase],
    q: str = "",
) -> SearchCommentsResponse:
    """Find comments containing q, case-insensitively, newest first.

    Queries shorter than three characters return no results.
    """
    try:
        return await search_comments_use_case.execute(SearchCommentsRequest(query=q))
    except TransientStorageError as e:
        logfire.error("Search failed", operation=e.operation, attempts=e.attempts)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Storage temporarily unavailable",
        )
