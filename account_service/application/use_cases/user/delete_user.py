# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import NotFoundError, USER_NOT_FOUND
from ...dto.user_dto import MessageResponse

logger = logging.getLogger(__name__)

ACCOUNT_REMOVED = "User Account Removed"


class DeleteUserUseCase:
    """Use case for removing the current user's account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> MessageResponse:
        """
        Delete the account. Its tokens stop working because the auth
        guard can no longer resolve the id.

        Raises:
            NotFoundError: If there was no account to delete
        """
        deleted = await self.user_repository.delete_by_id(user_id)
        if not deleted:
            raise NotFoundError(USER_NOT_FOUND)

        logger.info(f"Deleted user {user_id}")
        return MessageResponse(message=ACCOUNT_REMOVED)
