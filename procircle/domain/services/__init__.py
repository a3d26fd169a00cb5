from .user_directory import UserDirectory
from .post_feed import FeedPage, PostFeed

__all__ = ["UserDirectory", "PostFeed", "FeedPage"]
