# =============================================================================
# lib/user_store.py - User Persistence Interface
# =============================================================================
# This module defines the narrow repository contract the user services depend
# on, plus an in-memory implementation.
#
# The store owns identity and bookkeeping: it assigns `id`, `createdAt`,
# `updatedAt` and `version`. Callers only request operations and read back
# the records it returns.
#
# Records are plain dicts shaped like the API representation:
#   {"id", "name"?, "dob"?, "address"?, "description"?,
#    "createdAt", "updatedAt", "version"}
# Optional fields that were never supplied are absent, not None.
#
# Usage:
#   repo = InMemoryUserRepository()
#   user = repo.create({"name": "Test User"})
#   repo.update(user["id"], {"address": "Los Angeles"})  # -> 1
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol
from uuid import uuid4

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class UserStoreError(ApplicationError):
    """Raised when the backing store cannot complete an operation."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "USER_STORE_ERROR")
        super().__init__(message, **kwargs)


class UserRepository(Protocol):
    """
    Persistence contract for user records.

    Implementations must treat identifiers that are not well-formed keys
    for the store exactly like unknown identifiers.
    """

    def list_all(self) -> list[dict[str, Any]]:
        """Return every record in the store's natural (insertion) order."""
        ...

    def get(self, user_id: str) -> dict[str, Any] | None:
        """Return one record, or None if it doesn't exist."""
        ...

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Insert a record containing exactly `fields` and return it."""
        ...

    def update(self, user_id: str, fields: dict[str, Any]) -> int:
        """Overwrite the supplied fields and return the modified count (0 or 1)."""
        ...

    def delete(self, user_id: str) -> int:
        """Physically remove a record and return the deleted count (0 or 1)."""
        ...

    def ping(self) -> None:
        """Raise UserStoreError if the store is unreachable."""
        ...


class InMemoryUserRepository:
    """
    Process-local user store.

    Used by the test suite and selectable for local development with
    USER_STORE=memory. Data is lost when the process exits.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, which is the store's natural order
        self._records: dict[str, dict[str, Any]] = {}

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def list_all(self) -> list[dict[str, Any]]:
        return [dict(record) for record in self._records.values()]

    def get(self, user_id: str) -> dict[str, Any] | None:
        record = self._records.get(user_id)
        return dict(record) if record is not None else None

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        # uuid4 ids are not reused, even after a delete
        user_id = str(uuid4())

        now = self._now()
        record = {
            "id": user_id,
            **fields,
            "createdAt": now,
            "updatedAt": now,
            "version": 0,
        }
        self._records[user_id] = record
        logger.debug(f"Stored user {user_id} in memory")
        return dict(record)

    def update(self, user_id: str, fields: dict[str, Any]) -> int:
        record = self._records.get(user_id)
        if record is None:
            return 0

        # Clock resolution can repeat a timestamp; updatedAt must still advance
        updated_at = max(self._now(), record["updatedAt"] + timedelta(microseconds=1))

        record.update(fields)
        record["updatedAt"] = updated_at
        record["version"] += 1
        return 1

    def delete(self, user_id: str) -> int:
        if self._records.pop(user_id, None) is None:
            return 0
        return 1

    def ping(self) -> None:
        return None

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()
