"""
Central pytest configuration for the inventory API tests.

The environment is pinned before any application import so the store is
always an in-memory SQLite database and no log files are written.
"""

import os
import sys
from pathlib import Path

import pytest

backend_root = Path(__file__).parent.parent  # backend/
sys.path.insert(0, str(backend_root))

# Test environment (set early so import-time configuration uses it)
TEST_DATABASE_URL = "sqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TESTING"] = "true"
os.environ["FLASK_ENV"] = "testing"
os.environ["RATE_LIMIT_ENABLED"] = "0"  # Disable rate limiting in tests
os.environ["LOG_TO_FILE"] = "0"
os.environ.pop("SENTRY_DSN", None)
os.environ.pop("INVENTORY_COLLECTION", None)
os.environ.pop("CORS_ALLOWED_ORIGINS", None)

from inventory_api.db.session import (  # noqa: E402
    SessionLocal,
    create_tables,
    dispose_engine,
)
from inventory_api.main import create_app  # noqa: E402
from tests.config.markers import *  # noqa: E402,F401,F403


@pytest.fixture
def app():
    """Flask application backed by a fresh in-memory store."""
    dispose_engine()
    application = create_app()
    yield application
    dispose_engine()


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def db_session():
    """Session on a fresh in-memory store with the collection created."""
    dispose_engine()
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        dispose_engine()


@pytest.fixture
def widget_payload():
    return {"name": "Widget", "quantity": 5, "price": 9.99}
