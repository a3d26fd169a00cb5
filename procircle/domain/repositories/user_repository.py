from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Resolve many user IDs at once, keyed by ID. Unknown IDs are omitted."""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        pass

    @abstractmethod
    async def update_profile(self, user_id: str, changes: Dict[str, object]) -> Optional[User]:
        """
        Set the given profile fields on one user and return the updated user,
        or None if no user has that ID.
        """
        pass
