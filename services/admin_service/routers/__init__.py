"""Admin Service routers."""

from services.admin_service.routers.auth import router as auth_router
from services.admin_service.routers.creators import router as creators_router
from services.admin_service.routers.dashboard import router as dashboard_router
from services.admin_service.routers.supporters import router as supporters_router
from services.admin_service.routers.system import router as system_router
from services.admin_service.routers.wishlist import router as wishlist_router
from services.admin_service.routers.withdrawals import router as withdrawals_router

__all__ = [
    "auth_router",
    "creators_router",
    "dashboard_router",
    "supporters_router",
    "system_router",
    "wishlist_router",
    "withdrawals_router",
]
