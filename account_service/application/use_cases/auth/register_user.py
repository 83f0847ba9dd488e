# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.config import get_settings
from ....core.exceptions import ConflictError, USER_ALREADY_EXISTS
from ....core.security import hash_password, create_access_token
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user and issue a token for it

        Args:
            request: Registration request with user details

        Returns:
            AuthResponse with the created user's public fields and a token

        Raises:
            ConflictError: If a user with this email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError(USER_ALREADY_EXISTS)

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            hashed_password=hash_password(request.password),
            is_admin=False,
            pic=request.pic or get_settings().default_user_pic,
        )

        # The store's unique index still rejects a concurrent duplicate here
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        profile = UserResponse.from_user(saved_user)
        return AuthResponse(**profile.model_dump(), token=create_access_token(profile.id))
