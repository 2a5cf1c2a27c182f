import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from insurance_platform.app.core.config import get_settings

log = logging.getLogger(__name__)

# Global variables for engine and sessionmaker
_engine = None
_SessionLocal = None


def get_engine():
    """Get or create the database engine.

    Returns:
        Engine: The SQLAlchemy engine instance used to connect to the database.

    Notes:
        1. Create the engine only when first accessed to avoid premature connection.
        2. Reuse the same engine instance on subsequent calls to ensure consistency.
        3. The database URL and echo flag come from settings.

    """
    global _engine
    if _engine is None:
        _msg = "Creating database engine"
        log.debug(_msg)
        settings = get_settings()
        DATABASE_URL = str(settings.database_url)
        _engine = create_engine(DATABASE_URL, echo=settings.db_echo)
    return _engine


def get_session_local():
    """Get or create the session local factory.

    Returns:
        sessionmaker: The SQLAlchemy sessionmaker instance used to create database sessions.

    Notes:
        1. Create the sessionmaker only when first accessed to avoid premature configuration.
        2. Reuse the same sessionmaker instance on subsequent calls.

    """
    global _SessionLocal
    if _SessionLocal is None:
        _msg = "Creating session local factory"
        log.debug(_msg)
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _SessionLocal
