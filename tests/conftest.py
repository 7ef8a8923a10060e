# Environment must be set before anything imports the service settings.
import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="member-service-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TEST_DB_DIR}/members.db")
os.environ.setdefault("MEMBER_REPOSITORY", "memory")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from services.member_service.app.models.database import Base
from services.member_service.app.models.member import Member  # noqa: F401


@pytest.fixture(scope="function")
def sqlite_engine(tmp_path):
    """
    Fresh SQLite database file with the member table created, per test.
    """
    engine = create_engine(f"sqlite:///{tmp_path}/members.db")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(sqlite_engine):
    return sessionmaker(bind=sqlite_engine, autocommit=False, autoflush=False, expire_on_commit=False)
