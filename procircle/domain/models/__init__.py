from .user import User
from .post import Post, Comment, normalize_text

__all__ = ["User", "Post", "Comment", "normalize_text"]
