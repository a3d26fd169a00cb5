# Standard library imports
from typing import Any, Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateEmailError, InternalError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection

_PROFILE_FIELDS = (UserFields.NAME, UserFields.BIO, UserFields.PROFILE_PICTURE_URL)


def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Normalized email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise InternalError(f"Error finding user by email: {str(e)}", operation="find_by_email") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (malformed IDs included)
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding user by ID: {str(e)}", operation="find_by_id") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        object_ids: List[ObjectId] = []
        for user_id in dict.fromkeys(user_ids):
            object_id = _to_object_id(user_id)
            if object_id is not None:
                object_ids.append(object_id)

        if not object_ids:
            return {}

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users: Dict[str, User] = {}
            async for document in cursor:
                user = self._document_to_user(document)
                users[user.id or ""] = user
            return users
        except PyMongoError as e:
            raise InternalError(f"Error resolving users: {str(e)}", operation="find_by_ids") from e

    async def create(self, user: User) -> User:
        """
        Insert a new user document

        Args:
            user: User domain model without an ID

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateEmailError: If the unique email index rejects the insert
        """
        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(user.email) from e
        except PyMongoError as e:
            raise InternalError(f"Error saving user: {str(e)}", operation="create") from e

        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)

    async def update_profile(self, user_id: str, changes: Dict[str, object]) -> Optional[User]:
        """
        Set profile fields on a user document

        Args:
            user_id: ID of the user to update
            changes: Field name -> new value, limited to name, bio and profile picture

        Returns:
            Updated User domain model, None if the user does not exist
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        updates = {k: v for k, v in changes.items() if k in _PROFILE_FIELDS}
        if not updates:
            return await self.find_by_id(user_id)

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise InternalError(f"Error updating user profile: {str(e)}", operation="update_profile") from e

        if document is None:
            return None
        return self._document_to_user(document)

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise InternalError("Invalid user document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            bio=document.get(UserFields.BIO) or "",
            profile_picture_url=document.get(UserFields.PROFILE_PICTURE_URL),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)) or utc_now(),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.BIO: user.bio,
            UserFields.PROFILE_PICTURE_URL: user.profile_picture_url,
            UserFields.CREATED_AT: user.created_at,
        }
