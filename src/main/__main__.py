"""
Main module entry point.

This allows running the API as: python -m src.main
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings


def main() -> None:
    """Start the HTTP API with uvicorn."""
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    logger = get_logger(__name__)
    logger.info(
        "api.starting",
        host=settings.service.host,
        port=settings.service.port,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_level=settings.logging.level.value.lower(),
    )


if __name__ == "__main__":
    main()
