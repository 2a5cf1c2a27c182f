from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from insurance_platform.app.core.config import get_settings
from insurance_platform.app.database import database
from insurance_platform.app.models import Base, Role, RoleName


@pytest.fixture(autouse=True)
def reset_cached_state():
    """Auto-used fixture so each test sees fresh settings and database globals."""
    get_settings.cache_clear()
    database._engine = None
    database._SessionLocal = None
    yield
    get_settings.cache_clear()
    database._engine = None
    database._SessionLocal = None


@pytest.fixture
def mock_db_session():
    """Fixture to provide a mock database session."""
    return MagicMock()


@pytest.fixture
def sqlite_engine(tmp_path):
    """Fixture providing a file-backed SQLite engine with the schema created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'platform.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    """Fixture providing a session factory configured like the application's."""
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def seeded_roles(session_factory):
    """Fixture populating the role catalog the way the migration does."""
    db = session_factory()
    try:
        db.add_all([Role(name=role_name.value) for role_name in RoleName])
        db.commit()
    finally:
        db.close()
