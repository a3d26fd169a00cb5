# Local application imports
from ....domain.models.user import User
from ...dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    """Public representation of a user; the password hash never leaves the domain"""
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
        bio=user.bio,
        profile_picture_url=user.profile_picture_url,
        created_at=user.created_at,
    )
