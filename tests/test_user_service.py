# =============================================================================
# tests/test_user_service.py - User Service Tests
# =============================================================================
# Tests for UserService against the in-memory store, plus a mocked store
# for failure paths.
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.exceptions import DeleteFailedError, StoreUnavailableError, UserNotFoundError
from core.services import UserService
from lib.user_store import UserStoreError


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def broken_service():
    repository = MagicMock()
    error = UserStoreError("connection refused")
    for method in ("list_all", "get", "create", "update", "delete"):
        getattr(repository, method).side_effect = error
    return UserService(repository)


# =============================================================================
# Happy Path
# =============================================================================

class TestUserService:
    """Tests for CRUD operations."""

    def test_list_empty(self, service):
        assert service.list_users() == []

    def test_add_then_fetch(self, service, sample_user_fields):
        created = service.add_user(sample_user_fields)

        fetched = service.fetch_user(created["id"])

        assert fetched == created

    def test_add_exact_fields(self, service):
        created = service.add_user({"address": "Los Angeles"})

        assert set(created) == {"id", "address", "createdAt", "updatedAt", "version"}

    def test_update_partial(self, service, sample_user_fields):
        created = service.add_user(sample_user_fields)

        assert service.update_user(created["id"], {"description": "Changed"}) == 1

        fetched = service.fetch_user(created["id"])
        assert fetched["description"] == "Changed"
        assert fetched["name"] == sample_user_fields["name"]

    def test_update_unknown(self, service):
        assert service.update_user("1234567890", {"name": "x"}) == 0

    def test_delete(self, service, sample_user_fields):
        created = service.add_user(sample_user_fields)

        assert service.delete_user(created["id"]) == 1
        with pytest.raises(UserNotFoundError):
            service.fetch_user(created["id"])


# =============================================================================
# Error Taxonomy
# =============================================================================

class TestUserServiceErrors:
    """Tests for domain errors."""

    def test_fetch_unknown(self, service):
        with pytest.raises(UserNotFoundError) as exc_info:
            service.fetch_user("1234567890")

        assert exc_info.value.status_code == 400
        assert exc_info.value.to_dict() == {"error": "Could not find User"}

    def test_delete_unknown(self, service):
        with pytest.raises(DeleteFailedError) as exc_info:
            service.delete_user("1234567890")

        assert exc_info.value.to_dict() == {"error": "Could not delete User"}

    def test_store_failure_on_list(self, broken_service):
        with pytest.raises(StoreUnavailableError) as exc_info:
            broken_service.list_users()

        assert exc_info.value.status_code == 503
        assert isinstance(exc_info.value.__cause__, UserStoreError)

    def test_store_failure_on_add(self, broken_service):
        with pytest.raises(StoreUnavailableError):
            broken_service.add_user({})

    def test_store_failure_on_update(self, broken_service):
        with pytest.raises(StoreUnavailableError):
            broken_service.update_user("550e8400-e29b-41d4-a716-446655440000", {})

    def test_store_failure_on_fetch(self, broken_service):
        with pytest.raises(UserNotFoundError):
            broken_service.fetch_user("550e8400-e29b-41d4-a716-446655440000")

    def test_store_failure_on_delete(self, broken_service):
        with pytest.raises(DeleteFailedError):
            broken_service.delete_user("550e8400-e29b-41d4-a716-446655440000")
