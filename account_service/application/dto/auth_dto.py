from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from .user_dto import UserResponse, clean_name, check_password_bytes


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    pic: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return clean_name(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        return check_password_bytes(value)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class AuthResponse(UserResponse):
    """DTO for register/login responses: public user fields plus a bearer token"""
    token: str
