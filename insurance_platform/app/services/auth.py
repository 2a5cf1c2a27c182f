import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from insurance_platform.app.bootstrap.startup import seed_default_admin
from insurance_platform.app.core.config import get_settings
from insurance_platform.app.database.database import get_session_local
from insurance_platform.app.services.base import configure_logging, create_service_app

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the default admin account before the auth service accepts traffic.

    The seeding task blocks on the database and bcrypt, so it runs in a worker
    thread. A `StartupAbortedError` raised here propagates and stops the server.
    """
    _msg = "Auth service startup tasks starting"
    log.debug(_msg)
    await run_in_threadpool(seed_default_admin, get_session_local(), get_settings())
    _msg = "Auth service startup tasks finished"
    log.info(_msg)
    yield


def create_app() -> FastAPI:
    """Create the auth service application with its startup tasks attached."""
    return create_service_app("auth", lifespan=lifespan)


def main() -> None:
    """Run the auth service with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(), host=settings.service_host, port=settings.auth_service_port)


if __name__ == "__main__":
    main()
