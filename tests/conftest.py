"""
tests/conftest.py -- Shared test fixtures for card engine integration tests.

This module provides:
  - TEST_EMAIL / TEST_PASSWORD: the configured login used across the suite
  - _patch_lifespan(): wires a test session store into app.state, bypassing real startup
  - api_client: TestClient plus the session store behind it
  - session_store / auth_service: unit-level fixtures with no HTTP in between

The login env vars and LOGIN_RATE_LIMIT must be set before any
api/ or core/ import so the cached Settings singleton sees them.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import asynccontextmanager

TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "secret"

# CRITICAL: set before importing the app -- get_settings() is cached on first call.
os.environ["LOGIN_EMAIL"] = TEST_EMAIL
os.environ["LOGIN_PASSWORD"] = TEST_PASSWORD
# Small enough to exercise in a test; the autouse fixture below resets the
# counters so no single test comes near it unless it means to.
os.environ["LOGIN_RATE_LIMIT"] = "20/minute"

import pytest
from fastapi.testclient import TestClient

from api.limiter import limiter
from api.main import app
from auth.credentials import CredentialValidator
from auth.models import LoginCredentials
from auth.service import AuthService
from auth.store import InMemorySessionStore

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _patch_lifespan(store: InMemorySessionStore):
    """Return an async context manager that replaces the real lifespan.

    Wires the given store into app.state so tests can inspect session state
    directly, and builds the validator from the test credentials rather than
    whatever the environment holds.
    """

    @asynccontextmanager
    async def test_lifespan(app):
        validator = CredentialValidator(LoginCredentials(email=TEST_EMAIL, password=TEST_PASSWORD))
        app.state.session_store = store
        app.state.validator = validator
        app.state.auth_service = AuthService(validator, store)
        yield
        store.clear()

    return test_lifespan


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> Generator[None, None, None]:
    """Start every test with empty slowapi counters (memory storage is process-global)."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture(scope="module")
def api_client() -> Generator[tuple[TestClient, InMemorySessionStore], None, None]:
    """Yield (client, store) for API integration tests.

    One TestClient per test module for speed. The store is shared across the
    module's tests, so tests compare store sizes before and after rather
    than asserting absolute counts.
    """
    store = InMemorySessionStore()
    app.router.lifespan_context = _patch_lifespan(store)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, store


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def auth_service(session_store: InMemorySessionStore) -> AuthService:
    validator = CredentialValidator(LoginCredentials(email=TEST_EMAIL, password=TEST_PASSWORD))
    return AuthService(validator, session_store)
