from .base import CamelModel, MessageResponse
from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse, ProfileUpdateRequest, ProfileUpdateResponse
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    CommentCreateRequest,
    AuthorSummary,
    LikerSummary,
    CommenterSummary,
    CommentResponse,
    PostResponse,
    PostEnvelope,
    LikeResponse,
    PostListResponse,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "ProfileUpdateRequest",
    "ProfileUpdateResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "CommentCreateRequest",
    "AuthorSummary",
    "LikerSummary",
    "CommenterSummary",
    "CommentResponse",
    "PostResponse",
    "PostEnvelope",
    "LikeResponse",
    "PostListResponse",
]
