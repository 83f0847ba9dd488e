from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.get_user_profile import GetUserProfileUseCase
from ...application.use_cases.user.update_user_profile import UpdateUserProfileUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """Account management use case provider - view, edit and delete"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetUserProfileUseCase,
            lambda: GetUserProfileUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UpdateUserProfileUseCase,
            lambda: UpdateUserProfileUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
