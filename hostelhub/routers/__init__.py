"""API routers."""

from hostelhub.routers.auth import router as auth_router
from hostelhub.routers.dashboard import router as dashboard_router
from hostelhub.routers.health import router as health_router
from hostelhub.routers.hostels import router as hostels_router
from hostelhub.routers.reviews import router as reviews_router
from hostelhub.routers.speedtest import router as speedtest_router
from hostelhub.routers.uploads import router as uploads_router

__all__ = [
    "health_router",
    "auth_router",
    "dashboard_router",
    "hostels_router",
    "reviews_router",
    "speedtest_router",
    "uploads_router",
]
