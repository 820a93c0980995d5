"""Comment use cases."""

from .common import CommentItem, CommentTreeItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment_tree import (
    DeleteCommentTreeRequest,
    DeleteCommentTreeResponse,
    DeleteCommentTreeUseCase,
)
from .get_comment_tree import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from .list_comment_trees import (
    ListCommentTreesRequest,
    ListCommentTreesResponse,
    ListCommentTreesUseCase,
)
from .search_comments import (
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
)

__all__ = [
    "CommentItem",
    "CommentTreeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentTreeRequest",
    "DeleteCommentTreeResponse",
    "DeleteCommentTreeUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
    "ListCommentTreesRequest",
    "ListCommentTreesResponse",
    "ListCommentTreesUseCase",
    "SearchCommentsRequest",
    "SearchCommentsResponse",
    "SearchCommentsUseCase",
]
