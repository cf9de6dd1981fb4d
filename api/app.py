"""
Stockmeta REST API

FastAPI application exposing metadata generation and post-processing via
HTTP endpoints.

Usage:
    uvicorn api.app:app --reload --port 8000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import APIConfig
from api.routers import categories, export, health, metadata, process
from stockmeta import __version__

config = APIConfig.load()

app = FastAPI(
    title="Stockmeta API",
    description="REST API for turning vision model descriptions into stock marketplace metadata.",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers under /api/v1 prefix
PREFIX = "/api/v1"
app.include_router(health.router, prefix=PREFIX, tags=["Health"])
app.include_router(categories.router, prefix=PREFIX, tags=["Taxonomy"])
app.include_router(process.router, prefix=PREFIX, tags=["Processing"])
app.include_router(metadata.router, prefix=PREFIX, tags=["Processing"])
app.include_router(export.router, prefix=PREFIX, tags=["Export"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Stockmeta API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
