"""Health check endpoints"""

from fastapi import APIRouter
from app.infra.session_store import get_session_store

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "studybeats-backend",
        "active_sessions": len(get_session_store()),
    }
