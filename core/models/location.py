# =============================================================================
# core/models/location.py - Location Schemas
# =============================================================================
# Coordinates returned by the location lookup endpoint.
# Geocoding providers usually send (longitude, latitude) pairs; this model
# always names the two values explicitly.
# =============================================================================

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """
    A resolved latitude / longitude pair.

    Example:
        {"latitude": 34.0537, "longitude": -118.2428}
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @classmethod
    def from_center(cls, center: list[float]) -> "Coordinates":
        """Build from a provider center given as [longitude, latitude]."""
        longitude, latitude = center
        return cls(latitude=latitude, longitude=longitude)
