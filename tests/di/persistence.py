"""Mock persistence providers for testing."""

from dishka import Scope, provide

from inkwell.domain.repository import PostRepository
from inkwell.persistence.repository.inmemory import InMemoryPostRepository
from inkwell.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so every request made against one container sees the same
    posts. Test isolation comes from building a fresh container per test.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()
