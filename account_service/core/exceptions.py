"""
Error taxonomy for the account service.

Use cases raise these; the HTTP layer maps each one to its status code and a
``{"message": ...}`` body in a single place (see ``main.py``). The message of
an ``AccountServiceError`` is always safe to show to the caller.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountServiceError(Exception):
    """Base exception for all account service errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(AccountServiceError):
    """Raised when request input is missing or malformed."""
    status_code = 400


class ConflictError(AccountServiceError):
    """Raised when an email address is already registered."""
    status_code = 400


class AuthError(AccountServiceError):
    """
    Raised for rejected credentials (400) or a missing/invalid bearer token (401).

    Credential failures always carry the same message so callers cannot tell
    an unknown email apart from a wrong password.
    """
    status_code = 401


class NotFoundError(AccountServiceError):
    """Raised when a user id no longer resolves to a stored account."""
    status_code = 404


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalError(AccountServiceError):
    """Raised for unexpected failures; the message is generic."""
    status_code = 500

    def __init__(self, message: str = "internal server error"):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Messages
# -----------------------------------------------------------------------------

USER_ALREADY_EXISTS = "user already exists"
INVALID_CREDENTIALS = "invalid email or password"
NO_TOKEN = "not authorized, no token"
TOKEN_FAILED = "not authorized, token failed"
USER_NOT_FOUND = "user not found"
