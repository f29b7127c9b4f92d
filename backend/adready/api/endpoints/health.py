"""
Health check endpoint.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from adready.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    """Liveness probe."""
    return PlainTextResponse(settings.HEALTH_MESSAGE)
