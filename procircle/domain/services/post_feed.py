# Standard library imports
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# Local application imports
from ..exceptions import InvalidInputError, NotFoundError, UnauthorizedError
from ..models.post import Comment, Post, normalize_text
from ..repositories.post_repository import PostRepository
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


@dataclass
class FeedPage:
    """One page of posts, newest first"""
    page: int
    page_size: int
    total: int
    items: List[Post] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


def _validate_paging(page: int, page_size: int) -> int:
    """Check paging arguments and return the number of posts to skip"""
    if page < 1:
        raise InvalidInputError("page must be at least 1")
    if page_size < 1:
        raise InvalidInputError("page size must be at least 1")
    return (page - 1) * page_size


class PostFeed:
    """
    Owns posts, their embedded comments and like sets.

    Content changes and deletion are restricted to the post's author. Any
    authenticated user may like or comment on any post, their own included.
    Author IDs arrive from an already verified session and are trusted.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def create_post(self, author_id: str, content: str) -> Post:
        """
        Raises:
            InvalidInputError: If content is empty after trimming
        """
        new_post = Post(
            id=None,
            author_id=author_id,
            content=normalize_text(content, "Post content"),
            created_at=utc_now(),
        )
        saved_post = await self.post_repository.create(new_post)
        logger.info(f"User {author_id} created post {saved_post.id}")
        return saved_post

    async def list_feed(self, page: int, page_size: int) -> FeedPage:
        return await self._list(None, page, page_size)

    async def list_by_author(self, author_id: str, page: int, page_size: int) -> FeedPage:
        return await self._list(author_id, page, page_size)

    async def _list(self, author_id: Optional[str], page: int, page_size: int) -> FeedPage:
        skip = _validate_paging(page, page_size)
        total, items = await self.post_repository.list(
            author_id=author_id,
            skip=skip,
            limit=page_size,
        )
        return FeedPage(page=page, page_size=page_size, total=total, items=items)

    async def get_by_id(self, post_id: str) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    async def _get_owned(self, post_id: str, requester_id: str, action: str) -> Post:
        post = await self.get_by_id(post_id)
        if not post.is_authored_by(requester_id):
            raise UnauthorizedError(
                f"User {requester_id} may not {action} post {post_id}",
                user_message=f"Not authorized to {action} this post",
            )
        return post

    async def update_content(self, post_id: str, requester_id: str, new_content: str) -> Post:
        """
        Replace the content of a post. created_at is left untouched.

        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If requester is not the author
            InvalidInputError: If new content is empty after trimming
        """
        post = await self._get_owned(post_id, requester_id, "update")
        content = normalize_text(new_content, "Post content")

        updated_post = await self.post_repository.update_content(post.id or post_id, post.author_id, content)
        if updated_post is None:
            # Deleted between the ownership check and the write
            raise NotFoundError("Post", post_id)

        logger.info(f"User {requester_id} updated post {post_id}")
        return updated_post

    async def delete_post(self, post_id: str, requester_id: str) -> None:
        """
        Delete a post and its comments in one document removal.

        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If requester is not the author
        """
        post = await self._get_owned(post_id, requester_id, "delete")

        deleted = await self.post_repository.delete(post.id or post_id, post.author_id)
        if not deleted:
            raise NotFoundError("Post", post_id)

        logger.info(f"User {requester_id} deleted post {post_id}")

    async def toggle_like(self, post_id: str, requester_id: str) -> Tuple[Post, bool]:
        """
        Flip requester's membership in the like set.

        Returns:
            (updated post, True if the post is now liked by requester)

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_by_id(post_id)

        if post.is_liked_by(requester_id):
            updated_post = await self.post_repository.remove_like(post_id, requester_id)
        else:
            updated_post = await self.post_repository.add_like(post_id, requester_id)

        if updated_post is None:
            raise NotFoundError("Post", post_id)

        liked = updated_post.is_liked_by(requester_id)
        logger.debug(f"User {requester_id} {'liked' if liked else 'unliked'} post {post_id}")
        return updated_post, liked

    async def add_comment(self, post_id: str, requester_id: str, text: str) -> Post:
        """
        Append a comment to the end of the post's comment sequence.

        Raises:
            InvalidInputError: If text is empty after trimming
            NotFoundError: If the post does not exist
        """
        comment = Comment(
            author_id=requester_id,
            text=normalize_text(text, "Comment text"),
            created_at=utc_now(),
        )

        updated_post = await self.post_repository.append_comment(post_id, comment)
        if updated_post is None:
            raise NotFoundError("Post", post_id)

        logger.debug(f"User {requester_id} commented on post {post_id}")
        return updated_post
