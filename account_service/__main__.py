"""Run the API with uvicorn: ``python -m account_service``."""

import uvicorn

from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "account_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
