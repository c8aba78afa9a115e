"""
SharpStore Backend - FastAPI Application

A multi-tenant store backend: token-based authentication and user-owned
store documents persisted in MongoDB.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_api.config import configure_logging, get_settings
from store_api.core.exceptions import StoreError, store_error_handler
from store_api.database.connections import close_connections, get_gateway
from store_api.database.registry import create_indexes
from store_api.routers import auth, health, stores

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize the database connection
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up SharpStore Backend...")

    try:
        gateway = await get_gateway()
        await create_indexes(gateway)
        logger.info(f"Indexes created on '{gateway.database_name}'")
    except StoreError as e:
        logger.warning(f"Database initialization warning: {e.message}")

    yield

    # Shutdown
    logger.info("Shutting down SharpStore Backend...")
    await close_connections()
    logger.info("Database connection closed")


settings = get_settings()
configure_logging(settings.log_level)

# Create FastAPI application
app = FastAPI(
    title="SharpStore API",
    description="""
## SharpStore API

Users own stores; admins can list every store.

### Authentication
Obtain a token via `POST /GetAuthToken` with `{"username", "password"}`,
then send it on protected endpoints:
```
Authorization: Bearer your_jwt_token
```
The `?token=` query parameter is accepted as well.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error handlers
app.add_exception_handler(StoreError, store_error_handler)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(stores.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "SharpStore API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
