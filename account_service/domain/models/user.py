from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    is_admin: bool = False
    pic: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.name or not self.name.strip():
            raise ValueError("Name is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
