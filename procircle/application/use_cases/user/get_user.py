# Local application imports
from ....domain.services.user_directory import UserDirectory
from ...dto.user_dto import UserResponse
from .user_presenter import to_user_response


class GetUserUseCase:
    """Use case for reading a user's public profile"""

    def __init__(self, user_directory: UserDirectory) -> None:
        self.user_directory = user_directory

    async def execute(self, user_id: str) -> UserResponse:
        user = await self.user_directory.get_by_id(user_id)
        return to_user_response(user)
