"""
tests/conftest.py -- Shared test fixtures for Hackers Auth.

This module provides:
  - TEST_SECRET_KEY: the fixed signing key injected for every test session
  - client: module-scoped TestClient over the real FastAPI app

The env vars must be set before any api/auth/core import so get_settings()
picks up the known key rather than generating a random one.
"""

from __future__ import annotations

import os
from collections.abc import Generator

TEST_SECRET_KEY = "hackers-auth-test-signing-key-0123456789"

# CRITICAL: set before any project import -- get_settings() is cached and
# auth.tokens reads it at module load.
os.environ["SECRET_KEY"] = TEST_SECRET_KEY
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    """Yield a TestClient with the lifespan running (credential store loaded).

    Used as a context manager so startup/shutdown fire exactly as under
    uvicorn.
    """
    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client
