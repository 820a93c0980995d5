"""Mock persistence providers for testing."""

from dishka import Scope, provide

from commenttree.domain.repository import CommentRepository
from commenttree.persistence.repository.inmemory import InMemoryCommentRepository
from commenttree.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory repository.

    The repository is APP-scoped so data survives across requests made
    through one container; every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
