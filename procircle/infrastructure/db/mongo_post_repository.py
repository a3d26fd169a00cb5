# Standard library imports
from typing import Any, Dict, List, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Comment, Post
from ...domain.constants import CommentFields, PostFields
from ...domain.exceptions import InternalError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_post_collection

# Newest first; ID ascending keeps pages stable when timestamps tie
FEED_SORT = [(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, ASCENDING)]


def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """
    MongoDB implementation of PostRepository.

    Each post is one document; comments are an embedded array and likes an
    array of user IDs maintained with $addToSet/$pull, so every mutation here
    is a single-document atomic update.
    """

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def create(self, post: Post) -> Post:
        post_dict = self._post_to_dict(post)
        try:
            result = await self.post_collection.insert_one(post_dict)
        except PyMongoError as e:
            raise InternalError(f"Error saving post: {str(e)}", operation="create") from e

        post_dict[PostFields.MONGO_ID] = result.inserted_id
        return self._document_to_post(post_dict)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding post by ID: {str(e)}", operation="find_by_id") from e

        if document is None:
            return None
        return self._document_to_post(document)

    async def list(
        self,
        author_id: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[int, List[Post]]:
        query: Dict[str, Any] = {}
        if author_id:
            query[PostFields.AUTHOR_ID] = author_id

        try:
            total = await self.post_collection.count_documents(query)
            cursor = (
                self.post_collection.find(query)
                .sort(FEED_SORT)
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )

            items: List[Post] = []
            async for document in cursor:
                items.append(self._document_to_post(document))
            return total, items
        except PyMongoError as e:
            raise InternalError(f"Error listing posts: {str(e)}", operation="list") from e

    async def update_content(self, post_id: str, author_id: str, content: str) -> Optional[Post]:
        return await self._find_one_and_update(
            post_id,
            {"$set": {PostFields.CONTENT: content}},
            operation="update_content",
            extra_filter={PostFields.AUTHOR_ID: author_id},
        )

    async def delete(self, post_id: str, author_id: str) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one(
                {PostFields.MONGO_ID: object_id, PostFields.AUTHOR_ID: author_id}
            )
        except PyMongoError as e:
            raise InternalError(f"Error deleting post: {str(e)}", operation="delete") from e

        return result.deleted_count == 1

    async def add_like(self, post_id: str, user_id: str) -> Optional[Post]:
        return await self._find_one_and_update(
            post_id,
            {"$addToSet": {PostFields.LIKED_BY: user_id}},
            operation="add_like",
        )

    async def remove_like(self, post_id: str, user_id: str) -> Optional[Post]:
        return await self._find_one_and_update(
            post_id,
            {"$pull": {PostFields.LIKED_BY: user_id}},
            operation="remove_like",
        )

    async def append_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        return await self._find_one_and_update(
            post_id,
            {"$push": {PostFields.COMMENTS: self._comment_to_dict(comment)}},
            operation="append_comment",
        )

    async def _find_one_and_update(
        self,
        post_id: str,
        update: Dict[str, Any],
        operation: str,
        extra_filter: Optional[Dict[str, Any]] = None,
    ) -> Optional[Post]:
        """Apply one atomic update and return the post as it is afterwards"""
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        query: Dict[str, Any] = {PostFields.MONGO_ID: object_id}
        if extra_filter:
            query.update(extra_filter)

        try:
            document = await self.post_collection.find_one_and_update(
                query,
                update,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise InternalError(f"Error during {operation}: {str(e)}", operation=operation) from e

        if document is None:
            return None
        return self._document_to_post(document)

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise InternalError("Invalid post document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            author_id=str(document.get(PostFields.AUTHOR_ID, "")),
            content=document.get(PostFields.CONTENT, ""),
            liked_by=[str(user_id) for user_id in document.get(PostFields.LIKED_BY) or []],
            comments=[
                Comment(
                    author_id=str(sub.get(CommentFields.AUTHOR_ID, "")),
                    text=sub.get(CommentFields.TEXT, ""),
                    created_at=ensure_utc(sub.get(CommentFields.CREATED_AT)) or utc_now(),
                )
                for sub in document.get(PostFields.COMMENTS) or []
            ],
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)) or utc_now(),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        return {
            PostFields.AUTHOR_ID: post.author_id,
            PostFields.CONTENT: post.content,
            PostFields.LIKED_BY: list(post.liked_by),
            PostFields.COMMENTS: [self._comment_to_dict(c) for c in post.comments],
            PostFields.CREATED_AT: post.created_at,
        }

    @staticmethod
    def _comment_to_dict(comment: Comment) -> Dict[str, Any]:
        return {
            CommentFields.AUTHOR_ID: comment.author_id,
            CommentFields.TEXT: comment.text,
            CommentFields.CREATED_AT: comment.created_at,
        }
