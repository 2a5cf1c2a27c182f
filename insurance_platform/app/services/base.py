import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from insurance_platform.app.core.config import get_settings

log = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to standard output in the platform's format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def create_service_app(name: str, lifespan=None) -> FastAPI:
    """Create and configure the FastAPI application for one platform service.

    Args:
        name (str): The short service name, e.g. "auth".
        lifespan: Optional lifespan context manager run around serving.
            Startup tasks placed before its `yield` complete before any request is handled.

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Initialize the FastAPI application titled after the service.
        2. Add CORS middleware allowing the configured origins.
        3. Define a health check endpoint at "/health".

    """
    _msg = f"Creating FastAPI application for the {name} service"
    log.debug(_msg)

    settings = get_settings()
    app = FastAPI(title=f"{name.capitalize()} Service", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": name}

    _msg = f"FastAPI application for the {name} service created successfully"
    log.debug(_msg)
    return app
