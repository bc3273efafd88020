"""Shared fixtures.

The database URL and log directory are pointed at a temporary directory
before any application module is imported, so tests never touch the real
`meals.db`. Every test starts from a freshly created and seeded table.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="meal-tracker-tests-")
os.environ["WRITE_DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'meals.db')}"
os.environ.pop("READ_DATABASE_URL", None)
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")

import pytest
from fastapi.testclient import TestClient

from database import init_db, write_engine, WriteSessionLocal
from database.models import Base
from main import app


@pytest.fixture(autouse=True)
def fresh_db():
    """Drop and reseed the meals table before each test."""
    Base.metadata.drop_all(bind=write_engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
