from typing import TYPE_CHECKING
from ...domain.services.post_feed import PostFeed
from ...application.use_cases.post import (
    PostPresenter,
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
    ToggleLikeUseCase,
    AddCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            CreatePostUseCase,
            ListPostsUseCase,
            GetPostUseCase,
            UpdatePostUseCase,
            ToggleLikeUseCase,
            AddCommentUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    post_feed=container.get(PostFeed),
                    presenter=container.get(PostPresenter),
                )
            )

        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(post_feed=container.get(PostFeed))
        )
