"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from commenttree.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentTreeRequest,
    DeleteCommentTreeUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    ListCommentTreesRequest,
    ListCommentTreesResponse,
    ListCommentTreesUseCase,
)
from commenttree.domain.error import (
    NotFoundError,
    ParentNotFoundError,
    TransientStorageError,
    ValidationError,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    comment: str
    parent_id: int | None = None  # Parent comment ID for replies


class DeleteCommentAPIResponse(BaseModel):
    """API response for a deleted comment tree."""

    id: int


def _storage_unavailable(e: TransientStorageError) -> HTTPException:
    logfire.error(
        "Storage unavailable", operation=e.operation, attempts=e.attempts
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Storage temporarily unavailable",
    )


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a top-level comment or a reply to another comment.

    Args:
        request: Comment text and optional parent ID
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: 400 on blank text or bad parent, 500 on storage failure
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(text=request.comment, parent_id=request.parent_id)
        )
    except (ValidationError, ParentNotFoundError) as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except TransientStorageError as e:
        raise _storage_unavailable(e)


@router.get(
    "",
    response_model=GetCommentTreeResponse | ListCommentTreesResponse,
)
async def get_comments(
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    list_comment_trees_use_case: FromDishka[ListCommentTreesUseCase],
    parent: int | None = Query(default=None, ge=0),
    page: int = 1,
    limit: int | None = None,
    sort_by: str = "created_at",
    sort_order: str = "asc",
) -> GetCommentTreeResponse | ListCommentTreesResponse:
    """Get one comment tree, or a page of top-level trees.

    With ``parent`` the whole subtree under that comment is returned.
    Without it, top-level comments are paginated and each is returned with
    its subtree.

    Args:
        get_comment_tree_use_case: Get comment tree use case from DI
        list_comment_trees_use_case: List comment trees use case from DI
        parent: Root comment ID of the subtree to fetch
        page: 1-based page number
        limit: Page size
        sort_by: id or created_at
        sort_order: asc or desc

    Returns:
        A single tree or a page of trees

    Raises:
        HTTPException: 404 if parent doesn't exist, 500 on storage failure
    """
    try:
        if parent is not None:
            return await get_comment_tree_use_case.execute(
                GetCommentTreeRequest(comment_id=parent)
            )
        return await list_comment_trees_use_case.execute(
            ListCommentTreesRequest(
                page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except TransientStorageError as e:
        raise _storage_unavailable(e)


@router.delete("/{comment_id}", response_model=DeleteCommentAPIResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_tree_use_case: FromDishka[DeleteCommentTreeUseCase],
) -> DeleteCommentAPIResponse:
    """Delete a comment and all of its replies.

    Args:
        comment_id: Comment ID
        delete_comment_tree_use_case: Delete comment tree use case from DI

    Returns:
        ID of the deleted root comment

    Raises:
        HTTPException: 404 if comment doesn't exist, 500 on storage failure
    """
    try:
        result = await delete_comment_tree_use_case.execute(
            DeleteCommentTreeRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except TransientStorageError as e:
        raise _storage_unavailable(e)

    return DeleteCommentAPIResponse(id=result.id)
