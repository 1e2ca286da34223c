"""
Pytest configuration and shared fixtures for the Airgead planner tests.
"""

import os
from unittest.mock import Mock, patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from airgead import create_app
from airgead.blueprints.context import (
    AUTH_CLIENT_EXTENSION,
    SESSION_FACTORY_EXTENSION,
)
from airgead.config import Settings, reset_global_settings
from airgead.database.base import Base
from airgead.services.auth_service import AuthClient


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the local store at a temporary directory."""
    reset_global_settings()
    with patch.dict(os.environ, {}, clear=True):
        test_settings = Settings(
            _env_file=None,
            SECRET_KEY="test-secret-key-123",
            APP_ENV="testing",
            STORAGE_BASE_PATH=str(tmp_path / "storage"),
            DB_URL="sqlite://",
            AUTH_URL="https://auth.example.test",
            AUTH_API_KEY="anon-key",
        )
    yield test_settings
    reset_global_settings()


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory bound to the test database."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def auth_client():
    """Auth client double with the real client's interface."""
    return Mock(spec=AuthClient)


@pytest.fixture
def app(settings, session_factory, auth_client):
    """Application wired to the test database and the auth client double."""
    app = create_app(settings)
    app.extensions[SESSION_FACTORY_EXTENSION] = session_factory
    app.extensions[AUTH_CLIENT_EXTENSION] = auth_client
    return app


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client
