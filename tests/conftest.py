"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.

Every test gets its own file-backed SQLite database under tmp_path, so the
whole stack (routers, session guard, services, repositories, ORM) runs
without a PostgreSQL server.
"""

import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Generator

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Settings
from domain.models import Database
from main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file; cheap bcrypt rounds."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'dailydiet.db'}",
        environment="testing",
        bcrypt_rounds=4,
        db_init_attempts=1,
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client_factory(app):
    """
    Build extra TestClients against the same app.

    Each client keeps its own cookie jar, which makes it a separate
    browser session (useful for two-user scenarios).
    """
    with ExitStack() as stack:

        def make_client(cookies=None) -> TestClient:
            return stack.enter_context(TestClient(app, cookies=cookies))

        yield make_client


@pytest.fixture
def client(client_factory) -> TestClient:
    return client_factory()


@pytest.fixture
def db_session(test_settings) -> Generator[Session, None, None]:
    """
    Real database session for repository and service tests.

    The schema is created on a fresh SQLite file; the session is closed
    and the pool released after the test.
    """
    database = Database(test_settings.database_url)
    database.init_database()
    session = database.session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        database.dispose()
