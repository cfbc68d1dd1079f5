# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Identifier checks and the error base class shared by the store and
# geocoder integrations.
# =============================================================================

from typing import Any
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def is_valid_uuid(value: Any) -> bool:
    """
    Check whether a value is a well-formed UUID.

    Identifiers that fail this check can never match a stored record,
    so callers treat them as "not found" without asking the store.

    Example:
        is_valid_uuid("550e8400-e29b-41d4-a716-446655440000")  # True
        is_valid_uuid("1234567890")  # False
    """
    if isinstance(value, UUID):
        return True
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error for integration failures (user store, geocoder).

    These never reach clients directly. Services translate them into
    app.exceptions errors; the code, suggestion and details end up in logs.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: What to change to make the operation succeed
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
