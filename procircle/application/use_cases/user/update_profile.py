# Local application imports
from ....domain.services.user_directory import UserDirectory
from ...dto.user_dto import ProfileUpdateRequest, ProfileUpdateResponse
from .user_presenter import to_user_response


class UpdateProfileUseCase:
    """Use case for editing the current user's name, bio and profile picture"""

    def __init__(self, user_directory: UserDirectory) -> None:
        self.user_directory = user_directory

    async def execute(self, user_id: str, request: ProfileUpdateRequest) -> ProfileUpdateResponse:
        """
        Args:
            user_id: ID of the authenticated user
            request: Fields to change; omitted fields are left as they are

        Raises:
            NotFoundError: If the user no longer exists
            InvalidInputError: If name is supplied but blank
        """
        user = await self.user_directory.update_profile(
            user_id,
            name=request.name,
            bio=request.bio,
            profile_picture_url=request.profile_picture_url,
        )
        return ProfileUpdateResponse(user=to_user_response(user))
