"""Shared fixtures for the binary variations test suite."""

import pytest

from binary_variations.config import Settings, get_settings


@pytest.fixture
def abc():
    """Three variations."""
    return ["a", "b", "c"]


@pytest.fixture
def abcd():
    """Four variations."""
    return ["a", "b", "c", "d"]


@pytest.fixture
def client():
    """Test client with small, deterministic service settings."""
    from fastapi.testclient import TestClient
    from binary_variations.api.main import app

    app.dependency_overrides[get_settings] = lambda: Settings(
        max_variations=5, chunk_size=3, preview_limit=2
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
