from .get_user_profile import GetUserProfileUseCase
from .update_user_profile import UpdateUserProfileUseCase
from .delete_user import DeleteUserUseCase

__all__ = [
    "GetUserProfileUseCase",
    "UpdateUserProfileUseCase",
    "DeleteUserUseCase",
]
