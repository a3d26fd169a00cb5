from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    GetUserUseCase,
    UpdateProfileUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
    ToggleLikeUseCase,
    AddCommentUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "UpdateProfileUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
]
