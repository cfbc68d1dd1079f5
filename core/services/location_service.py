# =============================================================================
# core/services/location_service.py - User Location Lookup
# =============================================================================
# Resolves a stored user's address to coordinates:
#   fetch user (inline) -> geocode address -> named lat/lon
#
# Every failure collapses into LocationLookupFailedError. The caller can't
# tell an unknown user from a provider outage; the cause is only chained.
# =============================================================================

import logging

from app.exceptions import LocationLookupFailedError
from core.models.location import Coordinates
from core.services.user_service import UserService
from lib.geocoding import Geocoder

logger = logging.getLogger(__name__)


class LocationService:
    """Look up where a user lives via an external geocoder."""

    def __init__(self, users: UserService, geocoder: Geocoder):
        self.users = users
        self.geocoder = geocoder

    async def locate_user(self, user_id: str) -> Coordinates:
        """
        Resolve a user's address.

        The geocoder is only called once the user has been found with a
        non-empty address, and never more than once.

        Raises:
            LocationLookupFailedError: On any failure
        """
        try:
            user = self.users.fetch_user(user_id)
            address = user.get("address")
            if not address:
                raise ValueError("user has no address")
            return await self.geocoder.resolve(address)
        except Exception as e:
            logger.info(f"Location lookup failed for user: {user_id}")
            raise LocationLookupFailedError(user_id) from e
