# src/park_locator/main.py
"""Main entry point for the Park Locator application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from park_locator.api.v1 import (
    comments_router,
    parks_router,
    photos_router,
    tags_router,
    votes_router,
)
from park_locator.core.settings import settings
from park_locator.db.session import create_tables

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Park Locator API",
    description="Community-moderated park submissions",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(parks_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(photos_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(tags_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.auto_create_tables:
        create_tables()
        logger.info("Created database tables for %s", settings.effective_database_url)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Community-moderated park submissions",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("park_locator.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
