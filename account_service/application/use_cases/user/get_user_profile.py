# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import NotFoundError, USER_NOT_FOUND
from ...dto.user_dto import UserResponse


class GetUserProfileUseCase:
    """Use case for reading the current user's profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return UserResponse.from_user(user)
