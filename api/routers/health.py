"""Health and info endpoints."""

from fastapi import APIRouter

from api.models import HealthResponse
from stockmeta import __version__
from stockmeta.taxonomy import DEFAULT_TAXONOMY

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__, categories=len(DEFAULT_TAXONOMY))


@router.get("/version")
async def version():
    """Return API version."""
    return {"version": __version__}
