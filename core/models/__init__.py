# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record, request body and mutation result schemas
# - location.py: Coordinates returned by the location lookup
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    MUTABLE_USER_FIELDS,
    DeleteResult,
    UpdateResult,
    UserFields,
    UserResponse,
)
from .location import Coordinates

__all__ = [
    # User
    "MUTABLE_USER_FIELDS",
    "DeleteResult",
    "UpdateResult",
    "UserFields",
    "UserResponse",
    # Location
    "Coordinates",
]
