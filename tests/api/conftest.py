"""
Shared fixtures for API tests.

Each test gets its own seeded repository so mutations never leak between
tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_movie_repository
from app.api.main import app
from app.database.init_db import init_repository


@pytest.fixture
def repo():
    """Fresh repository holding the bundled seed movies."""
    return init_repository()


@pytest.fixture
def client(repo):
    """TestClient wired to the per-test repository."""
    app.dependency_overrides[get_movie_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
