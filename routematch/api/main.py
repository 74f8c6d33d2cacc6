"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routematch.config import get_settings
from routematch.api.routes import address, geo, qualifier
from routematch.api import dependencies

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    logger.info("Starting up RouteMatch API...")
    dependencies.get_dcn_matcher()
    dependencies.get_duplicate_detector()

    yield

    logger.info("Shutting down RouteMatch API...")
    dependencies.cleanup()


app = FastAPI(
    title=settings.app_name,
    description="Address canonicalization, match keys, proximity and attempt qualifiers",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(address.router, prefix="/api/v1/address", tags=["address"])
app.include_router(geo.router, prefix="/api/v1/geo", tags=["geo"])
app.include_router(qualifier.router, prefix="/api/v1/qualifier", tags=["qualifier"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "routematch"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "components": {
            "api": "up",
            "matching": "up",
        },
        "config": {
            "default_state": settings.matching.default_state,
            "match_radius_feet": settings.proximity.match_radius_feet,
            "timezone": settings.qualifier.timezone,
        },
    }
