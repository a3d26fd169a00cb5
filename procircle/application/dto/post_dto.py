from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class PostCreateRequest(CamelModel):
    """DTO for post creation request"""
    content: str


class PostUpdateRequest(CamelModel):
    """DTO for post content update request"""
    content: str


class CommentCreateRequest(CamelModel):
    """DTO for comment creation request"""
    text: str


class AuthorSummary(CamelModel):
    """Post author as embedded in post responses"""
    id: str
    name: str
    email: str
    profile_picture_url: Optional[str] = None


class LikerSummary(CamelModel):
    id: str
    name: str


class CommenterSummary(CamelModel):
    id: str
    name: str
    profile_picture_url: Optional[str] = None


class CommentResponse(CamelModel):
    """
    DTO for an embedded comment. author_id is always present; author is
    null when the referenced user no longer resolves.
    """
    author_id: str
    author: Optional[CommenterSummary] = None
    text: str
    created_at: datetime


class PostResponse(CamelModel):
    """DTO for post response with references resolved to summaries"""
    id: str
    content: str
    author_id: str
    author: Optional[AuthorSummary] = None
    liked_by: List[str] = Field(default_factory=list)
    likes: List[LikerSummary] = Field(default_factory=list)
    likes_count: int = 0
    comments: List[CommentResponse] = Field(default_factory=list)
    created_at: datetime


class PostEnvelope(CamelModel):
    """DTO for create/update/comment responses"""
    message: str
    post: PostResponse


class LikeResponse(CamelModel):
    message: str
    post: PostResponse
    liked: bool


class PostListResponse(CamelModel):
    """DTO for a page of posts"""
    posts: List[PostResponse] = Field(default_factory=list)
    current_page: int
    total_pages: int
    total_posts: int
