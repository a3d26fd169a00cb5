from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.post import Comment, Post


class PostRepository(ABC):
    """
    Repository interface - defines contract for post data access.

    Like and comment mutations must be single atomic document updates in the
    backing store (set-add, set-remove, array-append) so that concurrent
    requests on the same post never lose each other's writes.
    """

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post and return it with its ID set"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def list(
        self,
        author_id: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[int, List[Post]]:
        """
        List posts newest first (ties broken by ID ascending), optionally
        filtered to one author, returning (total, items)
        """
        pass

    @abstractmethod
    async def update_content(self, post_id: str, author_id: str, content: str) -> Optional[Post]:
        """Replace the content of a post owned by author_id; None if no such post"""
        pass

    @abstractmethod
    async def delete(self, post_id: str, author_id: str) -> bool:
        """Delete a post owned by author_id together with its comments"""
        pass

    @abstractmethod
    async def add_like(self, post_id: str, user_id: str) -> Optional[Post]:
        """Atomically add user_id to the like set; None if no such post"""
        pass

    @abstractmethod
    async def remove_like(self, post_id: str, user_id: str) -> Optional[Post]:
        """Atomically remove user_id from the like set; None if no such post"""
        pass

    @abstractmethod
    async def append_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        """Atomically append a comment to the end of the sequence; None if no such post"""
        pass
