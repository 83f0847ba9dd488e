# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_USER_PIC = "https://icon-library.com/images/anonymous-avatar-icon/anonymous-avatar-icon-25.jpg"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "account_service")
        self.mongo_user_collection: Final[str] = os.getenv("MONGO_USER_COLLECTION", "users")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 30))
        )

        # Account defaults
        self.default_user_pic: Final[str] = os.getenv("DEFAULT_USER_PIC", DEFAULT_USER_PIC)

        # HTTP server
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "5002"))
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
        )

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
