# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the user and location models:
# - Partial request bodies keep only what was sent
# - Responses serialize with camelCase keys and no null-filling
# - Provider centers map to named coordinates
# =============================================================================

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from core.models import Coordinates, DeleteResult, UpdateResult, UserFields, UserResponse


# =============================================================================
# UserFields Tests
# =============================================================================

class TestUserFields:
    """Tests for the request body model."""

    def test_supplied_returns_only_sent_fields(self):
        fields = UserFields(name="Test User", address="Los Angeles")

        assert fields.supplied() == {"name": "Test User", "address": "Los Angeles"}

    def test_empty_body(self):
        assert UserFields().supplied() == {}

    def test_explicit_null_is_kept(self):
        """A client sending null for a field did supply it."""
        fields = UserFields.model_validate({"description": None})

        assert fields.supplied() == {"description": None}

    def test_unknown_keys_are_dropped(self):
        fields = UserFields.model_validate({"name": "x", "createdAt": "yesterday", "role": "admin"})

        assert fields.supplied() == {"name": "x"}

    def test_numbers_become_text(self):
        fields = UserFields.model_validate({"name": 123, "dob": 20180827})

        assert fields.supplied() == {"name": "123", "dob": "20180827"}

    def test_structured_values_rejected(self):
        with pytest.raises(ValidationError):
            UserFields.model_validate({"address": {"city": "Los Angeles"}})


# =============================================================================
# UserResponse Tests
# =============================================================================

class TestUserResponse:
    """Tests for the response model."""

    @pytest.fixture
    def record(self):
        now = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        return {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Test User",
            "createdAt": now,
            "updatedAt": now,
            "version": 0,
        }

    def test_dump_uses_camel_case(self, record):
        dumped = UserResponse.model_validate(record).model_dump(by_alias=True, exclude_unset=True)

        assert "createdAt" in dumped
        assert "created_at" not in dumped

    def test_absent_fields_stay_absent(self, record):
        dumped = UserResponse.model_validate(record).model_dump(by_alias=True, exclude_unset=True)

        assert set(dumped) == {"id", "name", "createdAt", "updatedAt", "version"}

    def test_parses_iso_timestamps(self, record):
        record["createdAt"] = "2024-01-15T10:30:00+00:00"

        user = UserResponse.model_validate(record)

        assert user.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_requires_store_fields(self):
        with pytest.raises(ValidationError):
            UserResponse.model_validate({"name": "No Id"})


# =============================================================================
# Result Model Tests
# =============================================================================

class TestResults:
    """Tests for mutation result models."""

    def test_update_result_alias(self):
        assert UpdateResult(nModified=1).model_dump(by_alias=True) == {"nModified": 1}

    def test_delete_result(self):
        assert DeleteResult(n=1).model_dump() == {"n": 1}

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            DeleteResult(n=-1)


# =============================================================================
# Coordinates Tests
# =============================================================================

class TestCoordinates:
    """Tests for Coordinates."""

    def test_from_center_reverses_order(self):
        """Provider centers are [longitude, latitude]."""
        coords = Coordinates.from_center([-118.2428, 34.0537])

        assert coords.latitude == 34.0537
        assert coords.longitude == -118.2428

    def test_from_center_wrong_length(self):
        with pytest.raises(ValueError):
            Coordinates.from_center([1.0])

    def test_latitude_range(self):
        with pytest.raises(ValidationError):
            Coordinates(latitude=120.0, longitude=0.0)
