# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests replace them through app.dependency_overrides, e.g.
#   app.dependency_overrides[get_user_repository] = lambda: InMemoryUserRepository()
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services import LocationService, UserService
from lib.geocoding import Geocoder, MapboxGeocoder
from lib.supabase_client import SupabaseUserRepository
from lib.user_store import InMemoryUserRepository, UserRepository


@lru_cache
def get_user_repository() -> UserRepository:
    """
    Get the configured user store.

    Cached so the in-memory store keeps its records between requests.
    """
    if settings.USER_STORE == "memory":
        return InMemoryUserRepository()
    return SupabaseUserRepository()


@lru_cache
def get_geocoder() -> Geocoder:
    """Get the Mapbox geocoder built from settings."""
    return MapboxGeocoder(
        access_token=settings.MAPBOX_API_KEY,
        base_url=settings.MAPBOX_BASE_URL,
        timeout=settings.GEOCODER_TIMEOUT_SECONDS,
    )


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(repository)


def get_location_service(
    users: Annotated[UserService, Depends(get_user_service)],
    geocoder: Annotated[Geocoder, Depends(get_geocoder)],
) -> LocationService:
    return LocationService(users, geocoder)


# Type aliases for dependency injection
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
LocationServiceDep = Annotated[LocationService, Depends(get_location_service)]
