from .get_user import GetUserUseCase
from .update_profile import UpdateProfileUseCase
from .user_presenter import to_user_response

__all__ = [
    "GetUserUseCase",
    "UpdateProfileUseCase",
    "to_user_response",
]
