# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.exceptions import AuthError, NO_TOKEN
from ...di.container import get_container


# auto_error=False so a missing header reaches our own error channel
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency resolving the authenticated principal

    Args:
        credentials: Parsed "Authorization: Bearer <token>" header, if any

    Returns:
        UserResponse for the token's user

    Raises:
        AuthError: (401) If the header is missing/malformed or the token fails
        NotFoundError: If the token's user has been deleted
    """
    if credentials is None or not credentials.credentials:
        raise AuthError(NO_TOKEN)

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(credentials.credentials)
