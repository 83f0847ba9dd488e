# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client connects lazily, so calling this does not require a
    reachable server.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info("MongoDB client created for database %s", settings.mongo_database_name)
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[get_settings().mongo_user_collection]


def close_database() -> None:
    """Close the shared client; the next get_database() call opens a new one."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None
