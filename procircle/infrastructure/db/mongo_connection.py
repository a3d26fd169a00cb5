# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, PostFields

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB

    Returns:
        MongoDB collection for posts (comments and likes are embedded)
    """
    return get_database()["posts"]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    The unique email index backs registration uniqueness under concurrent
    requests; the post indexes serve the newest-first feed queries.
    """
    await get_user_collection().create_index(UserFields.EMAIL, unique=True)

    posts = get_post_collection()
    await posts.create_index([(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, ASCENDING)])
    await posts.create_index([
        (PostFields.AUTHOR_ID, ASCENDING),
        (PostFields.CREATED_AT, DESCENDING),
        (PostFields.MONGO_ID, ASCENDING),
    ])
    logger.info("MongoDB indexes ensured")


def close_connection() -> None:
    """Close the shared client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
