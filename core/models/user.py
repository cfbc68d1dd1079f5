# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserFields: Mutable fields accepted by POST / PUT / PATCH
# - UserResponse: A stored user record as returned to clients
# - UpdateResult / DeleteResult: Mutation counts reported by the store
#
# Every descriptive field is optional. A record only carries the fields that
# were actually supplied, so responses are serialized with exclude_unset.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# Fields a client may set. id, timestamps and version belong to the store.
MUTABLE_USER_FIELDS = ("name", "dob", "address", "description")


class UserFields(BaseModel):
    """
    Schema for the body of create / update requests.

    Any subset of the mutable fields may be sent, including none at all.
    Unknown keys are dropped, the same way the store would ignore them.
    Numbers are stored as their text form; other non-text values are
    rejected.

    Example:
        {
            "name": "Test User",
            "dob": "08/27/2018",
            "address": "Los Angeles"
        }
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str | None = Field(
        default=None,
        description="Display name"
    )

    # Free-form text, never parsed as a date
    dob: str | None = Field(
        default=None,
        description="Date of birth as entered by the client"
    )

    # Required later for the location lookup to succeed
    address: str | None = Field(
        default=None,
        description="Postal address or place name"
    )

    description: str | None = Field(
        default=None,
        description="Free text description"
    )

    def supplied(self) -> dict[str, Any]:
        """Return only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class UserResponse(BaseModel):
    """
    Schema for returning a user record to clients.

    Returned by:
    - GET /api/users (list)
    - GET /api/users/{id}
    - POST /api/users

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Test User",
            "address": "Los Angeles",
            "createdAt": "2024-01-15T10:30:00Z",
            "updatedAt": "2024-01-15T10:30:00Z",
            "version": 0
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Assigned by the store at creation
    id: str = Field(
        ...,
        description="Unique user identifier"
    )

    name: str | None = None
    dob: str | None = None
    address: str | None = None
    description: str | None = None

    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Timestamp when the user was created"
    )

    updated_at: datetime = Field(
        ...,
        alias="updatedAt",
        description="Timestamp of the last successful mutation"
    )

    version: int = Field(
        default=0,
        ge=0,
        description="Revision counter bumped by the store on update"
    )


class UpdateResult(BaseModel):
    """Result of PUT / PATCH: how many records the store modified."""

    model_config = ConfigDict(populate_by_name=True)

    n_modified: int = Field(..., alias="nModified", ge=0)


class DeleteResult(BaseModel):
    """Result of DELETE: how many records the store removed."""
    n: int = Field(..., ge=0)
