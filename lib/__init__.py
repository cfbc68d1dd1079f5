# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains the integrations behind the services:
# - user_store.py: UserRepository contract and in-memory store
# - supabase_client.py: Supabase-backed user store
# - geocoding.py: Geocoder contract and Mapbox client
# - utils.py: Shared utilities (error base class, UUID helpers)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import ApplicationError, is_valid_uuid
from lib.user_store import InMemoryUserRepository, UserRepository, UserStoreError
from lib.supabase_client import SupabaseClient, SupabaseClientError, SupabaseUserRepository
from lib.geocoding import Geocoder, GeocodingError, MapboxGeocoder, build_place_query

__all__ = [
    # Utils
    "ApplicationError",
    "is_valid_uuid",
    # User store
    "InMemoryUserRepository",
    "UserRepository",
    "UserStoreError",
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "SupabaseUserRepository",
    # Geocoding
    "Geocoder",
    "GeocodingError",
    "MapboxGeocoder",
    "build_place_query",
]
