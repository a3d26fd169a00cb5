# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.config import get_settings
from ...domain.exceptions import InvalidInputError, UnauthenticatedError
from ...di.container import get_container


# auto_error=False so a missing header is reported as our own 401 JSON body
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        UserResponse with user information

    Raises:
        UnauthenticatedError: If the header is missing, the token is invalid
            or the user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Missing bearer token")

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(credentials.credentials)


def resolve_page_size(limit: Optional[int]) -> int:
    """
    Apply the configured default and ceiling to a requested page size

    Raises:
        InvalidInputError: If limit exceeds MAX_PAGE_SIZE
    """
    settings = get_settings()
    if limit is None:
        return settings.default_page_size
    if limit > settings.max_page_size:
        raise InvalidInputError(f"limit cannot exceed {settings.max_page_size}")
    return limit
