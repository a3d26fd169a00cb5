# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import UserResponse, ProfileUpdateRequest, ProfileUpdateResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["users"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with access token and the created user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with access token and the user
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)


@router.get("/profile/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with user information
    """
    return current_user


@router.put("/profile/update", response_model=ProfileUpdateResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileUpdateResponse:
    """
    Update name, bio or profile picture of the current user

    Args:
        request: Fields to change
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)
    return await update_profile_use_case.execute(current_user.id, request)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    """
    Get a user's public profile by ID

    Args:
        user_id: ID of the user
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    return await get_user_use_case.execute(user_id)
