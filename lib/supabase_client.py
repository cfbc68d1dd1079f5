# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides the Supabase-backed user store.
# It implements the singleton pattern to reuse a single client connection
# and maps rows of the users table to API-shaped records.
#
# Expected table (Postgres):
#   create table users (
#     id          uuid primary key default gen_random_uuid(),
#     name        text,
#     dob         text,
#     address     text,
#     description text,
#     created_at  timestamptz not null default now(),
#     updated_at  timestamptz not null default now(),
#     version     integer not null default 0
#   );
#
# Usage:
#   from lib.supabase_client import SupabaseUserRepository
#   repo = SupabaseUserRepository()
#   users = repo.list_all()
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from supabase import create_client, Client

from app.config import settings
from core.models.user import MUTABLE_USER_FIELDS
from lib.user_store import UserStoreError
from lib.utils import is_valid_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(UserStoreError):
    """
    Error during Supabase operations.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(self, message: str, code: str = "SUPABASE_ERROR", **kwargs: Any):
        super().__init__(message, code=code, **kwargs)


class SupabaseClient:
    """
    Shared Supabase client.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
                raise SupabaseClientError(
                    message="Supabase is not configured",
                    code="CLIENT_NOT_CONFIGURED",
                    suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY, or use USER_STORE=memory"
                )
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance


# =============================================================================
# Row Mapping
# =============================================================================

def row_to_record(row: dict[str, Any]) -> dict[str, Any]:
    """
    Convert a users table row to an API-shaped record.

    Null descriptive columns are dropped so unsupplied fields stay absent.
    """
    record: dict[str, Any] = {"id": str(row["id"])}
    for field in MUTABLE_USER_FIELDS:
        if row.get(field) is not None:
            record[field] = row[field]
    record["createdAt"] = row["created_at"]
    record["updatedAt"] = row["updated_at"]
    record["version"] = row.get("version") or 0
    return record


def fields_to_row(fields: dict[str, Any]) -> dict[str, Any]:
    """Keep only the mutable columns from a field mapping."""
    return {key: value for key, value in fields.items() if key in MUTABLE_USER_FIELDS}


# =============================================================================
# Repository
# =============================================================================

class SupabaseUserRepository:
    """
    User store backed by a Supabase (Postgres) table.

    Identifiers that aren't UUIDs are answered locally as "not found",
    since Postgres would reject them with a cast error.

    Example:
        repo = SupabaseUserRepository()
        user = repo.create({"name": "Test User"})
        repo.delete(user["id"])  # -> 1
    """

    def __init__(self, client: Client | None = None, table: str | None = None):
        self._client = client
        self.table = table or settings.USERS_TABLE

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = SupabaseClient.get_client()
        return self._client

    def _query(self):
        return self.client.table(self.table)

    def list_all(self) -> list[dict[str, Any]]:
        try:
            response = (
                self._query()
                .select("*")
                .order("created_at")
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to list users: {e}",
                code="LIST_USERS_FAILED",
                suggestion=f"Check that the {self.table} table exists and is accessible",
            ) from e

        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} users")
        return [row_to_record(row) for row in rows]

    def get(self, user_id: str) -> dict[str, Any] | None:
        if not is_valid_uuid(user_id):
            return None

        try:
            response = (
                self._query()
                .select("*")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                details={"user_id": user_id},
            ) from e

        if not response.data:
            return None
        return row_to_record(response.data[0])

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        try:
            response = (
                self._query()
                .insert(fields_to_row(fields))
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create user: {e}",
                code="CREATE_USER_FAILED",
            ) from e

        if not response.data:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="CREATE_USER_FAILED",
                suggestion="Check that the service key is allowed to read back inserted rows",
            )
        return row_to_record(response.data[0])

    def update(self, user_id: str, fields: dict[str, Any]) -> int:
        current = self.get(user_id)
        if current is None:
            return 0

        # The table has no trigger; bookkeeping columns are written here
        update_data = {
            **fields_to_row(fields),
            "updated_at": datetime.now(timezone.utc).isoformat(),
            "version": current["version"] + 1,
        }

        try:
            response = (
                self._query()
                .update(update_data)
                .eq("id", user_id)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update user: {e}",
                code="UPDATE_USER_FAILED",
                details={"user_id": user_id},
            ) from e

        return len(response.data or [])

    def delete(self, user_id: str) -> int:
        if not is_valid_uuid(user_id):
            return 0

        try:
            response = (
                self._query()
                .delete()
                .eq("id", user_id)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete user: {e}",
                code="DELETE_USER_FAILED",
                details={"user_id": user_id},
            ) from e

        return len(response.data or [])

    def ping(self) -> None:
        try:
            self._query().select("id").limit(1).execute()
        except UserStoreError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"User store unreachable: {e}",
                code="PING_FAILED",
            ) from e
