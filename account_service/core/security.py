# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import ValidationError


BCRYPT_ROUNDS = 12
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password with a fresh bcrypt salt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string

    Raises:
        ValidationError: If the password is longer than bcrypt accepts
    """
    encoded = plain_password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValidationError(f"password cannot be longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(encoded, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plain password against a stored bcrypt hash.

    bcrypt.checkpw compares in constant time. A malformed or empty stored
    hash counts as a mismatch.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_jwt_token(payload: Dict[str, Any], expires_minutes: Optional[int] = None) -> str:
    """
    Create a signed JWT with iat/exp claims

    Args:
        payload: Claims to embed (at least "sub")
        expires_minutes: Lifetime override; defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    lifetime = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    issued_at = int(time.time())
    expires_at = issued_at + (lifetime * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def create_access_token(user_id: str) -> str:
    """Issue a bearer token bound to a user id."""
    return create_jwt_token({"sub": user_id})


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If the signature, format or expiry check fails
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
