# movieshelf/api/v1/system.py

from fastapi import APIRouter
from movieshelf.core.config import get_settings

router = APIRouter()


@router.get("/health")
def health_check():
    """Service health check"""
    return {"status": "healthy", "service": get_settings().app_name}
