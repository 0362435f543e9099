"""API route modules."""

from .health_routes import router as health_router
from .redirect_routes import router as redirects_router

__all__ = [
    "health_router",
    "redirects_router",
]
