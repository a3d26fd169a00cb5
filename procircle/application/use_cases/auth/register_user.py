# Local application imports
from ....domain.services.user_directory import UserDirectory
from ....core.security import create_access_token
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ..user.user_presenter import to_user_response


class RegisterUserUseCase:
    """Use case for registering a new user and signing them in"""

    def __init__(self, user_directory: UserDirectory) -> None:
        self.user_directory = user_directory

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            AuthResponse with an access token and the created user

        Raises:
            DuplicateEmailError: If user with email already exists
            InvalidInputError: If a field violates the registration policy
        """
        saved_user = await self.user_directory.register(
            name=request.name,
            email=request.email,
            raw_password=request.password,
            bio=request.bio,
        )

        token = create_access_token(saved_user.id or "", saved_user.email)

        return AuthResponse(
            message="User registered successfully",
            token=token,
            user=to_user_response(saved_user),
        )
