from pydantic import BaseModel
from services.admin_service.schemas.common import Money


class WishlistStats(BaseModel):
    total_items: int
    total_value: Money
    total_funded: Money
    priority_items: int
    funded_items: int


class GrowthStats(BaseModel):
    revenue: float  # percent, first to last month of the revenue series


class ChartSeries(BaseModel):
    labels: list[str]
    data: list[float]


class DashboardCharts(BaseModel):
    revenue: ChartSeries
    creators: ChartSeries


class DashboardStatsResponse(BaseModel):
    total_creators: int
    active_creators: int
    total_revenue: Money
    total_paid_out: Money
    pending_payouts: Money
    total_supporters: int
    wishlist: WishlistStats
    growth: GrowthStats
    charts: DashboardCharts
