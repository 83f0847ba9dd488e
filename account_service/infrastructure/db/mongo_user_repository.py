# Standard library imports
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.exceptions import ConflictError, USER_ALREADY_EXISTS
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique index that backs the one-account-per-email rule"""
        await self.user_collection.create_index(
            [(UserFields.EMAIL, ASCENDING)],
            unique=True,
            name=UserFields.EMAIL_INDEX,
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed ids)
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If the email is already taken by another document
            ValueError: If an existing user id is malformed or no longer stored
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        now = datetime.now(timezone.utc)
        user_dict[UserFields.UPDATED_AT] = now

        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
            else:
                user_dict[UserFields.CREATED_AT] = now
                result = await self.user_collection.insert_one(user_dict)

                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
                if document is None:
                    raise RuntimeError("User was created but could not be retrieved")
        except DuplicateKeyError:
            raise ConflictError(USER_ALREADY_EXISTS)
        except (ValueError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        return self._document_to_user(document)

    async def delete_by_id(self, user_id: str) -> bool:
        """
        Delete user by ID

        Args:
            user_id: User ID to delete

        Returns:
            True if a document was removed, False otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")
        return result.deleted_count > 0

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        try:
            return User(
                id=str(document[UserFields.MONGO_ID]),
                name=document.get(UserFields.NAME, ""),
                email=document.get(UserFields.EMAIL, ""),
                hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
                is_admin=bool(document.get(UserFields.IS_ADMIN, False)),
                pic=document.get(UserFields.PIC),
            )
        except ValueError as e:
            logger.error(f"Stored user document {document[UserFields.MONGO_ID]} is invalid: {e}")
            raise RuntimeError(f"Invalid user document {document[UserFields.MONGO_ID]}: {str(e)}")

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to the stored field set (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.IS_ADMIN: user.is_admin,
            UserFields.PIC: user.pic,
        }
