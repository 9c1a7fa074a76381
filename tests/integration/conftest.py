"""
Pytest configuration and fixtures for integration tests.

Integration tests drive the Flask app end to end. They run against a
temporary SQLite database by default; set TEST_DB_CONNECTION_STRING to a
PostgreSQL URL to also run the PostgreSQL-backed tests.
All tests in this directory should be marked with @pytest.mark.integration
"""

import os
from unittest.mock import Mock

import pytest

from backend.app import create_app
from services.auth import InMemorySessionStore
from services.jobs import JSearchClient


@pytest.fixture
def test_db_connection_string():
    """PostgreSQL connection string, or None when not configured."""
    return os.getenv("TEST_DB_CONNECTION_STRING")


@pytest.fixture
def jsearch_stub(sample_jsearch_payload):
    """Stub upstream client; assertions on it prove whether upstream was reached."""
    client = Mock(spec=JSearchClient)
    client.api_key = "test-key"
    client.timeout = 15
    client.search_jobs.return_value = sample_jsearch_payload
    return client


@pytest.fixture
def session_store(fake_clock):
    return InMemorySessionStore(clock=fake_clock)


@pytest.fixture
def app_factory(sqlite_database, session_store):
    """Build test apps sharing one database and session store."""

    def _make(jsearch_client=None, **overrides):
        config = {
            "TESTING": True,
            "SCRYPT_N": 2**10,
            "SESSION_MAX_AGE": 86400,
            "SESSION_IDLE_TIMEOUT": 0,
            "JSEARCH_API_KEY": None,
            "DEFAULT_SEARCH_QUERY": "Project Manager",
            "JSEARCH_NUM_PAGES": 1,
        }
        config.update(overrides)
        return create_app(
            config_overrides=config,
            database=sqlite_database,
            session_store=session_store,
            jsearch_client=jsearch_client,
        )

    return _make


@pytest.fixture
def test_app(app_factory, jsearch_stub):
    """Create a Flask test app with a temporary database and stub upstream."""
    return app_factory(jsearch_client=jsearch_stub)


@pytest.fixture
def test_client(test_app):
    """Create a Flask test client."""
    return test_app.test_client()


@pytest.fixture
def register_and_login(test_client):
    """Register a user, log in, and return the credentials used."""

    def _do(email="user@example.com", password="test_password_123"):
        response = test_client.post("/register", json={"email": email, "password": password})
        assert response.status_code == 201
        response = test_client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return email, password

    return _do
