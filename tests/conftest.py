# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an in-memory user store and a recording fake geocoder
# - Provides a TestClient wired to both through dependency overrides
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("USER_STORE", "memory")
os.environ.setdefault("MAPBOX_API_KEY", "test-mapbox-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_geocoder, get_user_repository
from app.main import app
from core.models.location import Coordinates
from lib.geocoding import GeocodingError
from lib.user_store import InMemoryUserRepository


# =============================================================================
# Fakes
# =============================================================================

class FakeGeocoder:
    """Geocoder that records every address it is asked to resolve."""

    def __init__(self, result: Coordinates | None = None, error: Exception | None = None):
        self.result = result or Coordinates(latitude=34.0537, longitude=-118.2428)
        self.error = error
        self.calls: list[str] = []

    async def resolve(self, address: str) -> Coordinates:
        self.calls.append(address)
        if self.error:
            raise self.error
        return self.result


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def repository():
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def geocoder():
    """Geocoder that always answers with downtown Los Angeles."""
    return FakeGeocoder()


@pytest.fixture
def failing_geocoder():
    """Geocoder that always fails like a provider outage."""
    return FakeGeocoder(error=GeocodingError("Geocoding request failed: 401 Unauthorized"))


@pytest.fixture
def client(repository, geocoder):
    """TestClient using the fixture store and geocoder."""
    app.dependency_overrides[get_user_repository] = lambda: repository
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user_fields():
    """A complete set of user fields."""
    return {
        "name": "Test User",
        "dob": "08/27/2018",
        "address": "Los Angeles",
        "description": "This is a test",
    }
