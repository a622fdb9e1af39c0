"""
Version and metadata endpoint
"""
from fastapi import APIRouter
from app.constants import SERVICE_NAME
from app.core.config import settings

router = APIRouter()


@router.get("/version")
async def get_version():
    """
    Get application version and metadata

    Returns:
        Service name, version and environment
    """
    return {
        "service": SERVICE_NAME,
        "version": settings.VERSION or "1.0.0",
        "env": settings.APP_ENV,
    }
