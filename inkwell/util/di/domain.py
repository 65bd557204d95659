"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import PostSettings
from inkwell.domain.repository import PostRepository
from inkwell.domain.service import PostService
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, post_settings: PostSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, post_settings=post_settings)
