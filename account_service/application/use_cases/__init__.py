from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
    DeleteUserUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserProfileUseCase",
    "UpdateUserProfileUseCase",
    "DeleteUserUseCase",
]
