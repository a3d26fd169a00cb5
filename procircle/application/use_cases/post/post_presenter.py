# Standard library imports
from typing import Dict, Iterable, List, Set

# Local application imports
from ....domain.models.post import Post
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import (
    AuthorSummary,
    CommentResponse,
    CommenterSummary,
    LikerSummary,
    PostResponse,
)


class PostPresenter:
    """
    Builds post responses, resolving author, liker and commenter IDs to user
    summaries with one batched user lookup per call. The domain keeps bare IDs.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def present(self, post: Post) -> PostResponse:
        return (await self.present_many([post]))[0]

    async def present_many(self, posts: Iterable[Post]) -> List[PostResponse]:
        posts = list(posts)
        users = await self.user_repository.find_by_ids(self._referenced_ids(posts))
        return [self._build(post, users) for post in posts]

    @staticmethod
    def _referenced_ids(posts: List[Post]) -> Set[str]:
        ids: Set[str] = set()
        for post in posts:
            ids.add(post.author_id)
            ids.update(post.liked_by)
            ids.update(comment.author_id for comment in post.comments)
        return ids

    @staticmethod
    def _build(post: Post, users: Dict[str, User]) -> PostResponse:
        author = users.get(post.author_id)
        likes = [
            LikerSummary(id=user_id, name=users[user_id].name)
            for user_id in post.liked_by
            if user_id in users
        ]
        comments = []
        for comment in post.comments:
            commenter = users.get(comment.author_id)
            comments.append(
                CommentResponse(
                    author_id=comment.author_id,
                    author=CommenterSummary(
                        id=comment.author_id,
                        name=commenter.name,
                        profile_picture_url=commenter.profile_picture_url,
                    ) if commenter else None,
                    text=comment.text,
                    created_at=comment.created_at,
                )
            )

        return PostResponse(
            id=post.id or "",
            content=post.content,
            author_id=post.author_id,
            author=AuthorSummary(
                id=post.author_id,
                name=author.name,
                email=author.email,
                profile_picture_url=author.profile_picture_url,
            ) if author else None,
            liked_by=list(post.liked_by),
            likes=likes,
            likes_count=len(post.liked_by),
            comments=comments,
            created_at=post.created_at,
        )
