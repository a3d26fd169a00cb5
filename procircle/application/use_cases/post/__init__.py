from .post_presenter import PostPresenter
from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .get_post import GetPostUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase
from .toggle_like import ToggleLikeUseCase
from .add_comment import AddCommentUseCase

__all__ = [
    "PostPresenter",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
]
