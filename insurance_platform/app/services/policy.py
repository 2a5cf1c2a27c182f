import logging

import uvicorn
from fastapi import FastAPI

from insurance_platform.app.core.config import get_settings
from insurance_platform.app.services.base import configure_logging, create_service_app

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the policy service application."""
    return create_service_app("policy")


def main() -> None:
    """Run the policy service with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(),
        host=settings.service_host,
        port=settings.policy_service_port,
    )


if __name__ == "__main__":
    main()
