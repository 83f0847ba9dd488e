# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import AuthError, INVALID_CREDENTIALS
from ....core.security import verify_password, create_access_token
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse with public user fields and a token

        Raises:
            AuthError: (400) for an unknown email or a wrong password alike
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.warning("Rejected login attempt")
            raise AuthError(INVALID_CREDENTIALS, status_code=400)

        profile = UserResponse.from_user(user)
        return AuthResponse(**profile.model_dump(), token=create_access_token(profile.id))
