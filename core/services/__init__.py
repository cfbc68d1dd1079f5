# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .location_service import LocationService

__all__ = [
    "UserService",
    "LocationService",
]
