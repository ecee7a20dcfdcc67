"""API routers for LinkHub."""

from .analytics import router as analytics_router
from .auth import router as auth_router
from .health import router as health_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .search import router as search_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "users_router",
    "posts_router",
    "search_router",
    "notifications_router",
    "analytics_router",
    "health_router",
]
