from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..exceptions import InvalidInputError
from ...utils.datetime_utils import utc_now


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    bio: str = ""
    profile_picture_url: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Business validations"""
        if not self.name or not self.name.strip():
            raise InvalidInputError("Name is required")
        if not self.email or "@" not in self.email:
            raise InvalidInputError("Invalid email format")
        if not self.hashed_password:
            raise InvalidInputError("Password hash is required")
        if self.bio is None:
            self.bio = ""
