from .config import Settings, get_settings
from .exceptions import (
    AccountServiceError,
    ValidationError,
    ConflictError,
    AuthError,
    NotFoundError,
    InternalError,
)
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    create_access_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "AccountServiceError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "NotFoundError",
    "InternalError",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "create_access_token",
    "decode_jwt_token",
]
