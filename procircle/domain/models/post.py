# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import InvalidInputError
from ...utils.datetime_utils import utc_now


def normalize_text(value: Optional[str], field_name: str) -> str:
    """
    Trim user-supplied text and reject it if nothing is left.

    Raises:
        InvalidInputError: If value is None or whitespace only
    """
    trimmed = (value or "").strip()
    if not trimmed:
        raise InvalidInputError(f"{field_name} is required")
    return trimmed


@dataclass(frozen=True)
class Comment:
    """Comment embedded in a Post. Immutable once appended."""
    author_id: str
    text: str
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not self.author_id:
            raise InvalidInputError("Comment author is required")
        if not self.text or not self.text.strip():
            raise InvalidInputError("Comment text is required")


@dataclass
class Post:
    """
    Pure domain model for Post entity - no external dependencies.

    The post owns its comment sequence (oldest first) and its like set.
    author_id and created_at are fixed at creation.
    """
    id: Optional[str]
    author_id: str
    content: str
    liked_by: List[str] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.author_id:
            raise InvalidInputError("Post author is required")
        if not self.content or not self.content.strip():
            raise InvalidInputError("Post content is required")
        # A user appears at most once in the like set, first occurrence wins
        self.liked_by = list(dict.fromkeys(self.liked_by))

    def is_authored_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.author_id == user_id

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.liked_by
