# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import AuthError, NotFoundError, TOKEN_FAILED, USER_NOT_FOUND
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated principal from a bearer token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Verify the token, then load the user it names

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information (never the password hash)

        Raises:
            AuthError: (401) If the token is invalid, expired or has no subject
            NotFoundError: If the token's user no longer exists
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError:
            raise AuthError(TOKEN_FAILED)

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthError(TOKEN_FAILED)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        return UserResponse.from_user(user)
