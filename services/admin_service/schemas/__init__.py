"""Admin Service schemas package."""

from services.admin_service.schemas.auth import (  # noqa: F401
    AdminUserResponse,
    LoginRequest,
    LoginResponse,
)
from services.admin_service.schemas.common import Money  # noqa: F401
from services.admin_service.schemas.creators import CreatorResponse  # noqa: F401
from services.admin_service.schemas.dashboard import (  # noqa: F401
    ChartSeries,
    DashboardCharts,
    DashboardStatsResponse,
    GrowthStats,
    WishlistStats,
)
from services.admin_service.schemas.supporters import SupporterResponse  # noqa: F401
from services.admin_service.schemas.wishlist import WishlistItemResponse  # noqa: F401
from services.admin_service.schemas.withdrawals import (  # noqa: F401
    MessageResponse,
    WithdrawalListResponse,
    WithdrawalResponse,
    WithdrawalStatusUpdate,
    WithdrawalSummary,
)
