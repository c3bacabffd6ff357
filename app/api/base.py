from fastapi import APIRouter
from app.api import health, settings
from app.features import history, spotify

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(settings.router)
api_router.include_router(spotify.router)
api_router.include_router(history.router)
