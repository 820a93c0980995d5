"""Domain layer DI providers."""

import logfire
from dishka import Scope, provide

from commenttree.config import CommentSettings
from commenttree.domain.repository import CommentRepository
from commenttree.domain.service import CommentService
from commenttree.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        settings: CommentSettings,
        log: logfire.Logfire,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, settings=settings, log=log
        )
