"""Health check endpoints."""

from fastapi import APIRouter

from laneful.version import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "laneful-webhooks", "version": __version__}


@router.get("/health/live")
async def liveness():
    """Liveness probe — always returns 200 if process is running."""
    return {"status": "alive"}
