# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status

# Local application imports
from ...application.dto.base import MessageResponse
from ...application.dto.post_dto import (
    CommentCreateRequest,
    LikeResponse,
    PostCreateRequest,
    PostEnvelope,
    PostListResponse,
    PostResponse,
    PostUpdateRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from ...di.container import get_container
from .dependencies import get_current_user, resolve_page_size


router = APIRouter(tags=["posts"])


@router.get("", response_model=PostListResponse)
async def list_posts(
    page: int = Query(1),
    limit: Optional[int] = Query(None),
) -> PostListResponse:
    """
    Home feed, newest first

    Args:
        page: 1-indexed page number
        limit: Posts per page (defaults to DEFAULT_PAGE_SIZE)
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute(page=page, page_size=resolve_page_size(limit))


@router.post("", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostEnvelope:
    """
    Publish a post as the current user

    Args:
        request: Post creation request
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)
    return await create_post_use_case.execute(request, author_id=current_user.id)


@router.get("/user/{user_id}", response_model=PostListResponse)
async def list_user_posts(
    user_id: str,
    page: int = Query(1),
    limit: Optional[int] = Query(None),
) -> PostListResponse:
    """
    One user's posts, newest first

    Args:
        user_id: Author whose posts to list
        page: 1-indexed page number
        limit: Posts per page (defaults to DEFAULT_PAGE_SIZE)
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute(
        page=page,
        page_size=resolve_page_size(limit),
        author_id=user_id,
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str) -> PostResponse:
    """
    Get a post by ID

    Args:
        post_id: ID of the post
    """
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)
    return await get_post_use_case.execute(post_id)


@router.put("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostEnvelope:
    """
    Replace the content of one of the current user's posts

    Args:
        post_id: ID of the post
        request: New content
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)
    return await update_post_use_case.execute(post_id, request, requester_id=current_user.id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete one of the current user's posts

    Args:
        post_id: ID of the post
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)
    return await delete_post_use_case.execute(post_id, requester_id=current_user.id)


@router.post("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> LikeResponse:
    """
    Like a post, or unlike it if the current user already liked it

    Args:
        post_id: ID of the post
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    toggle_like_use_case = container.get(ToggleLikeUseCase)
    return await toggle_like_use_case.execute(post_id, requester_id=current_user.id)


@router.post("/{post_id}/comment", response_model=PostEnvelope)
async def add_comment(
    post_id: str,
    request: CommentCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostEnvelope:
    """
    Comment on a post

    Args:
        post_id: ID of the post
        request: Comment text
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    add_comment_use_case = container.get(AddCommentUseCase)
    return await add_comment_use_case.execute(post_id, request, requester_id=current_user.id)
