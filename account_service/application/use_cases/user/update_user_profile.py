# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import ConflictError, NotFoundError, USER_ALREADY_EXISTS, USER_NOT_FOUND
from ....core.security import hash_password
from ...dto.user_dto import UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)


class UpdateUserProfileUseCase:
    """Use case for editing the current user's profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Apply the supplied fields to the stored user

        Fields left out of the request (or sent as null) keep their current
        value. is_admin is never touched here.

        Args:
            user_id: ID of the authenticated user
            request: Fields to change

        Returns:
            UserResponse with the updated profile

        Raises:
            NotFoundError: If the user no longer exists
            ConflictError: If the new email belongs to another user
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        if request.email is not None and request.email != user.email:
            owner = await self.user_repository.find_by_email(request.email)
            if owner is not None and owner.id != user.id:
                raise ConflictError(USER_ALREADY_EXISTS)
            user.email = request.email

        if request.name is not None:
            user.name = request.name
        if request.pic is not None:
            user.pic = request.pic
        if request.password is not None:
            user.hashed_password = hash_password(request.password)

        try:
            saved_user = await self.user_repository.save(user)
        except ValueError:
            # Deleted between the lookup and the write
            raise NotFoundError(USER_NOT_FOUND)

        logger.info(f"Updated user {saved_user.id}")
        return UserResponse.from_user(saved_user)
