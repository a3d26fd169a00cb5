"""
Shared pytest fixtures for ProCircle tests.

In-memory repositories implement the domain repository contracts so domain
services can be exercised end to end without MongoDB.
"""
import itertools
import os
from typing import Dict, Iterable, List, Optional, Tuple
from unittest.mock import MagicMock, patch

import pytest

from procircle.domain.exceptions import DuplicateEmailError
from procircle.domain.models.post import Comment, Post
from procircle.domain.models.user import User
from procircle.domain.repositories.post_repository import PostRepository
from procircle.domain.repositories.user_repository import UserRepository
from procircle.domain.services.post_feed import PostFeed
from procircle.domain.services.user_directory import UserDirectory

_id_counter = itertools.count(1)


def _next_id() -> str:
    """ObjectId-shaped ids so they sort the same way MongoDB's do"""
    return f"{next(_id_counter):024x}"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        return {uid: self.users[uid] for uid in user_ids if uid in self.users}

    async def create(self, user: User) -> User:
        if await self.find_by_email(user.email) is not None:
            raise DuplicateEmailError(user.email)
        user.id = _next_id()
        self.users[user.id] = user
        return user

    async def update_profile(self, user_id: str, changes: Dict[str, object]) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            return None
        for key, value in changes.items():
            setattr(user, key, value)
        return user


class InMemoryPostRepository(PostRepository):
    def __init__(self) -> None:
        self.posts: Dict[str, Post] = {}

    async def create(self, post: Post) -> Post:
        post.id = _next_id()
        self.posts[post.id] = post
        return post

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        return self.posts.get(post_id)

    async def list(self, author_id: Optional[str], skip: int, limit: int) -> Tuple[int, List[Post]]:
        matching = [p for p in self.posts.values() if author_id is None or p.author_id == author_id]
        matching.sort(key=lambda p: p.id)
        matching.sort(key=lambda p: p.created_at, reverse=True)
        return len(matching), matching[skip:skip + limit]

    async def update_content(self, post_id: str, author_id: str, content: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is None or post.author_id != author_id:
            return None
        post.content = content
        return post

    async def delete(self, post_id: str, author_id: str) -> bool:
        post = self.posts.get(post_id)
        if post is None or post.author_id != author_id:
            return False
        del self.posts[post_id]
        return True

    async def add_like(self, post_id: str, user_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is not None and user_id not in post.liked_by:
            post.liked_by.append(user_id)
        return post

    async def remove_like(self, post_id: str, user_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is not None and user_id in post.liked_by:
            post.liked_by.remove(user_id)
        return post

    async def append_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is not None:
            post.comments.append(comment)
        return post


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_procircle_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "MIN_PASSWORD_LENGTH": "6",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.min_password_length = 6
    mock.default_page_size = 10
    mock.max_page_size = 100

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("procircle.core.config.get_settings", return_value=mock), patch(
        "procircle.core.security.get_settings", return_value=mock
    ), patch("procircle.api.v1.dependencies.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def user_directory(user_repo):
    return UserDirectory(user_repo, min_password_length=6)


@pytest.fixture
def post_feed(post_repo):
    return PostFeed(post_repo)
