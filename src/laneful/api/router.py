"""Master API router."""

from fastapi import APIRouter

from laneful.api.routes import health, webhooks

api_router = APIRouter()
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(webhooks.router)
