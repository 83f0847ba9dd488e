from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save user (create when id is None, update otherwise).

        Raises ConflictError when the email already belongs to another user.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> bool:
        """Delete user by ID; returns False when nothing was deleted"""
        pass

    async def ensure_indexes(self) -> None:
        """Create store-side constraints (unique email). No-op by default."""
        return None
