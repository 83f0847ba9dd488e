from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ...core.security import BCRYPT_MAX_PASSWORD_BYTES
from ...domain.models.user import User


def clean_name(value: Optional[str]) -> Optional[str]:
    """Strip a display name and reject one that is blank"""
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("name must not be blank")
    return value


def check_password_bytes(value: Optional[str]) -> Optional[str]:
    """bcrypt refuses passwords longer than 72 UTF-8 bytes"""
    if value is not None and len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return value


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: EmailStr
    is_admin: bool = Field(default=False, alias="isAdmin")
    pic: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            pic=user.pic,
        )


class UserUpdateRequest(BaseModel):
    """DTO for profile edits; omitted or null fields keep their stored value"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=72)
    pic: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return clean_name(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        return check_password_bytes(value)


class MessageResponse(BaseModel):
    """DTO for plain confirmation/error bodies"""
    message: str
