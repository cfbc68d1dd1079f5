# =============================================================================
# app/routers/users.py - User CRUD and Location Endpoints
# =============================================================================
# Mounted under /api/users in main.py.
#
#   GET    /                 list users                  200
#   POST   /                 create user                 201
#   GET    /{user_id}        fetch one user              200 / 400
#   PUT    /{user_id}        partial update              201 / 404 without id
#   PATCH  /{user_id}        partial update              201 / 404 without id
#   DELETE /{user_id}        delete user                 200 / 400
#   GET    /mapbox/{user_id} geocode the user's address  200 / 400
#
# Collection routes answer both with and without a trailing slash, so the
# base path never redirects.
#
# Updates answer 201 rather than 200; existing clients depend on it.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from app.dependencies import LocationServiceDep, UserServiceDep
from core.models.location import Coordinates
from core.models.user import DeleteResult, UpdateResult, UserFields, UserResponse

router = APIRouter()

UserIdPath = Annotated[str, Path(description="User identifier assigned by the store")]


# =============================================================================
# Collection Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[UserResponse],
    response_model_exclude_unset=True,
)
@router.get(
    "/",
    response_model=list[UserResponse],
    response_model_exclude_unset=True,
    include_in_schema=False,
)
async def list_users(users: UserServiceDep):
    """
    List all users.

    Returns every record in store order, or an empty list.
    """
    return users.list_users()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    response_model_exclude_unset=True,
)
@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    response_model_exclude_unset=True,
    include_in_schema=False,
)
async def add_user(users: UserServiceDep, fields: UserFields | None = None):
    """
    Create a user.

    Only the fields present in the body are stored. Sending no fields at
    all creates an empty record.
    """
    return users.add_user(fields.supplied() if fields else {})


@router.api_route("", methods=["PUT", "PATCH", "DELETE"], include_in_schema=False)
@router.api_route("/", methods=["PUT", "PATCH", "DELETE"], include_in_schema=False)
async def missing_user_id():
    """Mutations need an id in the path."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


# =============================================================================
# Location Endpoint
# =============================================================================

@router.get("/mapbox/{user_id}", response_model=Coordinates)
async def fetch_user_location(user_id: UserIdPath, locations: LocationServiceDep):
    """
    Geocode the user's stored address.

    Any failure (unknown user, no address, provider error) returns the same
    400 response.
    """
    return await locations.locate_user(user_id)


# =============================================================================
# Single User Endpoints
# =============================================================================

@router.get(
    "/{user_id}",
    response_model=UserResponse,
    response_model_exclude_unset=True,
)
async def fetch_user(user_id: UserIdPath, users: UserServiceDep):
    """Get one user."""
    return users.fetch_user(user_id)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=UpdateResult,
)
async def update_user(user_id: UserIdPath, users: UserServiceDep, fields: UserFields | None = None):
    """
    Update a user.

    Behaves like PATCH: only the supplied fields are replaced.
    """
    modified = users.update_user(user_id, fields.supplied() if fields else {})
    return UpdateResult(nModified=modified)


@router.patch(
    "/{user_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=UpdateResult,
)
async def patch_user(user_id: UserIdPath, users: UserServiceDep, fields: UserFields | None = None):
    """Partially update a user."""
    modified = users.update_user(user_id, fields.supplied() if fields else {})
    return UpdateResult(nModified=modified)


@router.delete("/{user_id}", response_model=DeleteResult)
async def delete_user(user_id: UserIdPath, users: UserServiceDep):
    """Delete a user permanently."""
    return DeleteResult(n=users.delete_user(user_id))
