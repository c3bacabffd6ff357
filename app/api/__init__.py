# API module exports
from app.api import health, settings
from app.api.base import api_router

__all__ = ["health", "settings", "api_router"]
