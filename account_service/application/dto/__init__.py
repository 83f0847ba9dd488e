from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse, UserUpdateRequest, MessageResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "UserUpdateRequest",
    "MessageResponse",
]
