"""Application layer DI providers."""

from dishka import Scope, provide

from commenttree.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentTreeUseCase,
    GetCommentTreeUseCase,
    ListCommentTreesUseCase,
    SearchCommentsUseCase,
)
from commenttree.domain.service import CommentService
from commenttree.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentTreeUseCase:
        """Provide delete comment tree use case."""
        return DeleteCommentTreeUseCase(comment_service=comment_service)

    @provide
    def get_list_comment_trees_use_case(
        self, comment_service: CommentService
    ) -> ListCommentTreesUseCase:
        """Provide list comment trees use case."""
        return ListCommentTreesUseCase(comment_service=comment_service)

    @provide
    def get_search_comments_use_case(
        self, comment_service: CommentService
    ) -> SearchCommentsUseCase:
        """Provide search comments use case."""
        return SearchCommentsUseCase(comment_service=comment_service)
