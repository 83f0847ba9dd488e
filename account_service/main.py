# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import account_router
from .core.config import get_settings
from .core.exceptions import AccountServiceError, ValidationError, InternalError
from .di.container import get_container, reset_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (and with it the MongoDB client), makes sure the
    unique email index exists, and closes the client on shutdown.
    """
    container = get_container()
    try:
        await container.get(UserRepository).ensure_indexes()
        logger.info("User indexes ensured")
    except Exception as e:
        # Don't fail app startup if MongoDB is unreachable; requests will report 500
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    yield

    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def _message_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "invalid value")
    return f"{location}: {detail}" if location else detail


def register_exception_handlers(application: FastAPI) -> None:
    """Map every failure to a JSON {"message": ...} body with the right status"""

    @application.exception_handler(AccountServiceError)
    async def account_error_handler(request: Request, exc: AccountServiceError):
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return _message_response(exc.status_code, exc.message, headers)

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(_describe_validation_error(exc))
        logger.info(f"Validation error on {request.method} {request.url.path}: {error.message}")
        return _message_response(error.status_code, error.message)

    @application.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "not found"
        else:
            message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return _message_response(exc.status_code, message, getattr(exc, "headers", None))

    @application.exception_handler(RuntimeError)
    async def store_error_handler(request: Request, exc: RuntimeError):
        # Handled inside the middleware stack so CORS headers are still applied
        logger.error(f"Store error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        error = InternalError()
        return _message_response(error.status_code, error.message)

    @application.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Internal server error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        error = InternalError()
        return _message_response(error.status_code, error.message)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error translation
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    application = FastAPI(
        title="Account Service API",
        version="1.0.0",
        description="User registration, login and profile management",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(account_router)

    return application


# Create application instance
app = create_application()
