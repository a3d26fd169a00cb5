# Local application imports
from ....domain.services.user_directory import UserDirectory
from ....core.security import create_access_token
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ..user.user_presenter import to_user_response


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_directory: UserDirectory) -> None:
        self.user_directory = user_directory

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse with an access token and the user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user_id = await self.user_directory.authenticate_credentials(request.email, request.password)
        user = await self.user_directory.get_by_id(user_id)

        token = create_access_token(user.id or "", user.email)

        return AuthResponse(
            message="Login successful",
            token=token,
            user=to_user_response(user),
        )
