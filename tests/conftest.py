"""Shared fixtures for the Resource API tests."""

import pytest
from fastapi.testclient import TestClient

from resource_api.app.core.config import MEMORY_DATABASE, Settings
from resource_api.app.core.db import Database, init_db
from resource_api.app.main import create_app
from resource_api.app.services.resource_service import ResourceService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the store at a per-test temporary directory."""
    return Settings(db_path=str(tmp_path / "data"), log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan: store opened, schema created.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database():
    with Database(MEMORY_DATABASE) as db:
        init_db(db)
        yield db


@pytest.fixture
def service(database):
    return ResourceService(database)
