# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_models.py: Pydantic model behaviour
# - test_user_store.py: In-memory store bookkeeping
# - test_supabase_repository.py: Supabase store with a mocked client
# - test_geocoding.py: Mapbox client against a mock transport
# - test_user_service.py / test_location_service.py: Service layer
# - test_users_api.py / test_health.py: HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
