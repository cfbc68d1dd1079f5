# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations on top of a UserRepository.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from lib.user_store import UserRepository, UserStoreError
from app.exceptions import DeleteFailedError, StoreUnavailableError, UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user record operations.

    Provides a clean interface between API routes and the user store.
    The store assigns ids, timestamps and versions; this class never
    fabricates them.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def list_users(self) -> list[dict[str, Any]]:
        """
        List every user in store order.

        Raises:
            StoreUnavailableError: If the store query fails
        """
        try:
            users = self.repository.list_all()
        except UserStoreError as e:
            logger.error(f"Failed to list users: {e}")
            raise StoreUnavailableError() from e

        logger.debug(f"Listed {len(users)} users")
        return users

    def fetch_user(self, user_id: str) -> dict[str, Any]:
        """
        Get a user by ID.

        Args:
            user_id: Identifier taken from the request path

        Returns:
            The full user record

        Raises:
            UserNotFoundError: If the user doesn't exist, the id is malformed,
                or the store can't answer
        """
        try:
            user = self.repository.get(user_id)
        except UserStoreError as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            raise UserNotFoundError(user_id) from e

        if user is None:
            raise UserNotFoundError(user_id)

        return user

    def add_user(self, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Create a user with exactly the supplied fields.

        No field is required; an empty mapping creates an empty record.

        Raises:
            StoreUnavailableError: If the insert fails
        """
        try:
            user = self.repository.create(fields)
        except UserStoreError as e:
            logger.error(f"Failed to create user: {e}")
            raise StoreUnavailableError() from e

        logger.info(f"Created user: {user['id']}")
        return user

    def update_user(self, user_id: str, fields: dict[str, Any]) -> int:
        """
        Overwrite the supplied fields of a user.

        Fields not present in `fields` are left untouched.

        Returns:
            Number of records modified (0 or 1)

        Raises:
            StoreUnavailableError: If the update fails
        """
        try:
            modified = self.repository.update(user_id, fields)
        except UserStoreError as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            raise StoreUnavailableError() from e

        if modified:
            logger.info(f"Updated user: {user_id} ({', '.join(sorted(fields)) or 'no fields'})")
        else:
            logger.debug(f"Update matched no user: {user_id}")
        return modified

    def delete_user(self, user_id: str) -> int:
        """
        Physically delete a user.

        Returns:
            Number of records deleted (always 1 on success)

        Raises:
            DeleteFailedError: If nothing was deleted, the id is malformed,
                or the store can't answer
        """
        try:
            deleted = self.repository.delete(user_id)
        except UserStoreError as e:
            logger.error(f"Failed to delete user {user_id}: {e}")
            raise DeleteFailedError(user_id) from e

        if not deleted:
            raise DeleteFailedError(user_id)

        logger.info(f"Deleted user: {user_id}")
        return deleted
