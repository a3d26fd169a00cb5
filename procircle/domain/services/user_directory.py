# Standard library imports
import logging
from typing import Dict, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ..exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from ..constants import UserFields
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ...core.security import MAX_PASSWORD_BYTES, hash_password, verify_password
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

# Verified against when the email is unknown so both failure paths cost one bcrypt check
_dummy_hash: Optional[str] = None


def _get_dummy_hash() -> str:
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("procircle-dummy-password")
    return _dummy_hash


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class UserDirectory:
    """
    Owns user identity and profile data.

    Email and password are fixed at registration; only name, bio and
    profile picture can change afterwards.
    """

    def __init__(self, user_repository: UserRepository, min_password_length: int = 6) -> None:
        self.user_repository = user_repository
        self.min_password_length = min_password_length

    async def register(
        self,
        name: str,
        email: str,
        raw_password: str,
        bio: Optional[str] = None,
    ) -> User:
        """
        Register a new user with a bcrypt-hashed password.

        Raises:
            InvalidInputError: If name is empty, email is malformed or the
                password is shorter than the configured minimum or longer than
                bcrypt accepts
            DuplicateEmailError: If a user with this email already exists
        """
        clean_name = (name or "").strip()
        if not clean_name:
            raise InvalidInputError("Name is required")

        clean_email = normalize_email(email)
        try:
            validate_email(clean_email, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidInputError(
                f"A valid email is required: {e}",
                user_message="A valid email is required",
            ) from e

        if not raw_password or len(raw_password) < self.min_password_length:
            raise InvalidInputError(
                f"Password must be at least {self.min_password_length} characters"
            )
        if len(raw_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInputError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")

        existing_user = await self.user_repository.find_by_email(clean_email)
        if existing_user is not None:
            raise DuplicateEmailError(clean_email)

        new_user = User(
            id=None,  # Will be set by repository
            name=clean_name,
            email=clean_email,
            hashed_password=hash_password(raw_password),
            bio=(bio or "").strip(),
            created_at=utc_now(),
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id}")
        return saved_user

    async def authenticate_credentials(self, email: str, raw_password: str) -> str:
        """
        Check an email/password pair and return the matching user ID.

        Raises:
            InvalidCredentialsError: On unknown email or wrong password alike
        """
        user = await self.user_repository.find_by_email(normalize_email(email))
        if user is None:
            verify_password(raw_password or "", _get_dummy_hash())
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()

        if not verify_password(raw_password or "", user.hashed_password):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()

        return user.id or ""

    async def get_by_id(self, user_id: str) -> User:
        """
        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def update_profile(
        self,
        user_id: str,
        name: Optional[str] = None,
        bio: Optional[str] = None,
        profile_picture_url: Optional[str] = None,
    ) -> User:
        """
        Change the supplied profile fields; omitted (None) fields keep their value.

        Raises:
            InvalidInputError: If name is supplied but blank
            NotFoundError: If no user has this ID
        """
        changes: Dict[str, object] = {}
        if name is not None:
            clean_name = name.strip()
            if not clean_name:
                raise InvalidInputError("Name cannot be empty")
            changes[UserFields.NAME] = clean_name
        if bio is not None:
            changes[UserFields.BIO] = bio.strip()
        if profile_picture_url is not None:
            changes[UserFields.PROFILE_PICTURE_URL] = profile_picture_url.strip() or None

        if not changes:
            return await self.get_by_id(user_id)

        updated_user = await self.user_repository.update_profile(user_id, changes)
        if updated_user is None:
            raise NotFoundError("User", user_id)

        logger.info(f"Updated profile of user {user_id}: {sorted(changes)}")
        return updated_user
