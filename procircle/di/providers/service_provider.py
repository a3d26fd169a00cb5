from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.services.user_directory import UserDirectory
from ...domain.services.post_feed import PostFeed
from ...application.use_cases.post.post_presenter import PostPresenter

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Domain service provider - UserDirectory, PostFeed and the post presenter"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register domain services as singletons.
        They hold no per-request state, only their repositories.
        """
        settings = get_settings()

        container.register_singleton(
            UserDirectory,
            UserDirectory(
                user_repository=container.get(UserRepository),
                min_password_length=settings.min_password_length,
            )
        )

        container.register_singleton(
            PostFeed,
            PostFeed(post_repository=container.get(PostRepository))
        )

        container.register_singleton(
            PostPresenter,
            PostPresenter(user_repository=container.get(UserRepository))
        )
