# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every handler-level failure becomes a fixed JSON body of the form
#   {"error": "<fixed message>"}
# Internal causes (store errors, provider errors, tracebacks) are never
# sent to the caller.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UsersApiException(Exception):
    """
    Base exception for the users API.

    All custom exceptions inherit from this class. The message is the
    complete client-facing error text; `code` is for logs only.
    """

    def __init__(
        self,
        message: str,
        code: str = "USERS_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UsersApiException):
    """Raised when a user ID is unknown or not a valid store key."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Could not find User",
            code="USER_NOT_FOUND",
            status_code=400,
            details={"user_id": user_id}
        )


class DeleteFailedError(UsersApiException):
    """Raised when a delete matched nothing or the ID was malformed."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Could not delete User",
            code="DELETE_FAILED",
            status_code=400,
            details={"user_id": user_id}
        )


class StoreUnavailableError(UsersApiException):
    """Raised when the user store fails during list, create or update."""

    def __init__(self):
        super().__init__(
            message="User store unavailable",
            code="STORE_UNAVAILABLE",
            status_code=503,
        )


# =============================================================================
# Location Exceptions
# =============================================================================

class LocationLookupFailedError(UsersApiException):
    """
    Raised for any failure while resolving a user's address.

    Unknown user, missing address, provider and network errors all end up
    here with the same message. The original exception is kept only as
    __cause__.
    """

    def __init__(self, user_id: str):
        super().__init__(
            message="Unable to fetch location information from user id",
            code="LOCATION_LOOKUP_FAILED",
            status_code=400,
            details={"user_id": user_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def users_api_exception_handler(
    request: Request,
    exc: UsersApiException
) -> JSONResponse:
    """
    Convert UsersApiException to JSON response.
    """
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors.

    The body must be a JSON object whose known fields are text, numbers
    or null.
    """
    logger.debug(f"Rejected request body for {request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body"}
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle anything no other handler claimed."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"}
    )
