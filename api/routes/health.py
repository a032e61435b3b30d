"""Health check routes"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from app.config import Settings

router = APIRouter(tags=["Health"])


@router.get("/health-check")
def health_check(settings: Settings = Depends(get_settings)):
    """Basic health check endpoint"""
    return {"status": "ok", "service": settings.app_name}
