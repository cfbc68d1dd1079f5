# =============================================================================
# lib/geocoding.py - Geocoding Provider Client
# =============================================================================
# Resolves free-text addresses to coordinates.
#
# The location service only depends on the one-method Geocoder protocol.
# MapboxGeocoder is the production implementation: it issues exactly one
# GET against the Mapbox place-search endpoint per call, with no caching
# and no retries.
#
# Usage:
#   geocoder = MapboxGeocoder(access_token="pk...")
#   coords = await geocoder.resolve("Los Angeles")
#   print(coords.latitude, coords.longitude)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from core.models.location import Coordinates
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class GeocodingError(ApplicationError):
    """Raised when an address cannot be resolved to coordinates."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("code", "GEOCODING_FAILED")
        super().__init__(message, **kwargs)


class Geocoder(Protocol):
    """Translate address text into coordinates."""

    async def resolve(self, address: str) -> Coordinates:
        ...


def build_place_query(address: str) -> str:
    """
    Turn an address into a place-search path token.

    Whitespace becomes %20 and any character that would break the URL
    path is percent-encoded as well.

    Example:
        build_place_query("Los Angeles")  # "Los%20Angeles"
    """
    return quote(address, safe="")


class MapboxGeocoder:
    """
    Geocoder backed by the Mapbox Geocoding API (v5, mapbox.places).

    Args:
        access_token: Mapbox access token sent as the access_token query param
        base_url: API root, overridable for tests and proxies
        timeout: Seconds to wait for the provider; None waits indefinitely
        client: Optional shared httpx.AsyncClient. When omitted a client is
            opened for each call.
    """

    PLACES_PATH = "/geocoding/v5/mapbox.places/{query}.json"

    def __init__(
        self,
        access_token: str,
        base_url: str = "https://api.mapbox.com",
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def place_url(self, address: str) -> str:
        """Build the place-search URL (without the token) for an address."""
        return self.base_url + self.PLACES_PATH.format(query=build_place_query(address))

    async def _get(self, url: str) -> httpx.Response:
        params = {"access_token": self.access_token}
        if self._client is not None:
            return await self._client.get(url, params=params, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, params=params)

    async def resolve(self, address: str) -> Coordinates:
        """
        Resolve an address using the first feature returned by Mapbox.

        Raises:
            GeocodingError: On transport errors, non-2xx responses, or a
                body without a usable features[0].center
        """
        if not address or not address.strip():
            raise GeocodingError("Address is empty")

        url = self.place_url(address)
        logger.debug(f"Geocoding request: {url}")

        try:
            response = await self._get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise GeocodingError(f"Geocoding request failed: {e}") from e

        try:
            features = response.json()["features"]
            return Coordinates.from_center(features[0]["center"])
        except Exception as e:
            raise GeocodingError(f"Unexpected geocoding response: {e}") from e
