# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    UsersApiException,
    unexpected_exception_handler,
    users_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the effective backend configuration on startup.
    """
    logger.info(f"Starting Users API in {settings.ENVIRONMENT} mode")
    logger.info(f"User store: {settings.USER_STORE}")
    if not settings.mapbox_key_configured:
        logger.warning("MAPBOX_API_KEY is not set; location lookups will fail")

    yield

    logger.info("Shutting down Users API")


# Create FastAPI application
app = FastAPI(
    title="Users API",
    description="""
## User Records API

CRUD over user records plus a location lookup that geocodes a user's
stored address through Mapbox.

### Quick Start

```bash
# Create a user
curl -X POST http://localhost:8000/api/users/ \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Test User", "address": "Los Angeles"}'

# Look up where they live
curl http://localhost:8000/api/users/mapbox/{id}
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "Create, read, update and delete user records",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(UsersApiException)
async def handle_users_api_exception(request: Request, exc: UsersApiException):
    """Handle domain exceptions raised by the services."""
    return await users_api_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# User endpoints
app.include_router(
    users.router,
    prefix="/api/users",
    tags=["Users"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Users API",
        "version": "1.0.0",
        "docs": "/docs",
        "users": "/api/users",
        "health": "/api/v1/health",
    }
