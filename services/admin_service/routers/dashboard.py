from fastapi import APIRouter, Depends
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.executor import QueryExecutor
from libs.db.session import get_executor
from services.admin_service.schemas import DashboardStatsResponse
from services.admin_service.services.dashboard import get_dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    _admin: AuthUser = Depends(get_current_user),
    executor: QueryExecutor = Depends(get_executor),
):
    """
    Headline figures, wishlist summary and six-month chart series for the
    dashboard landing page.
    """
    return await get_dashboard_stats(executor)
