"""Dashboard statistics.

Each figure is its own query; they are not run in a shared transaction, so
a status change landing mid-request can show up in some figures and not
others.
"""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Optional

from dateutil.relativedelta import relativedelta
from libs.common.currency import to_amount
from libs.common.datetime_utils import month_label, utc_now
from libs.db.executor import QueryExecutor
from libs.db.functions import year_month
from services.admin_service.models import (
    PaymentStatus,
    Profile,
    Supporter,
    UserType,
    WishlistItem,
    status_is,
)
from services.admin_service.schemas import (
    ChartSeries,
    DashboardCharts,
    DashboardStatsResponse,
    GrowthStats,
    WishlistStats,
)
from services.admin_service.services.shaping import shape_row, to_count
from services.admin_service.services.withdrawals import sum_withdrawals_query
from sqlalchemy import case, distinct, func, select, text

CHART_MONTHS = 6


def revenue_growth(series: Sequence[Decimal]) -> float:
    """Percent change from the first to the last month of ``series``.

    Fewer than two points, or a zero first month, gives 0.0.
    """
    if len(series) < 2:
        return 0.0
    first, last = Decimal(series[0]), Decimal(series[-1])
    if first == 0:
        return 0.0
    return round(float((last - first) / first * 100), 1)


def chart_window_start(now: Optional[datetime] = None) -> datetime:
    """Start of the monthly chart window, CHART_MONTHS calendar months back."""
    return (now or utc_now()) - relativedelta(months=CHART_MONTHS)


def _is_creator():
    return Profile.user_type == UserType.CREATOR.value


async def _monthly_revenue(executor: QueryExecutor, since) -> list[dict]:
    month = year_month(Supporter.created_at).label("month")
    rows = await executor.fetch_all(
        select(month, func.coalesce(func.sum(Supporter.amount), 0).label("revenue"))
        .where(
            status_is(Supporter.status, PaymentStatus.COMPLETED),
            Supporter.created_at >= since,
        )
        .group_by(text("month"))
        .order_by(text("month"))
    )
    return [shape_row(row, money=("revenue",)) for row in rows]


async def _monthly_new_creators(executor: QueryExecutor, since) -> list[dict]:
    month = year_month(Profile.created_at).label("month")
    rows = await executor.fetch_all(
        select(month, func.count().label("new_creators"))
        .where(_is_creator(), Profile.created_at >= since)
        .group_by(text("month"))
        .order_by(text("month"))
    )
    return [shape_row(row, counts=("new_creators",)) for row in rows]


async def _wishlist_stats(executor: QueryExecutor) -> WishlistStats:
    row = await executor.fetch_one(
        select(
            func.count().label("total_items"),
            func.sum(WishlistItem.price).label("total_value"),
            func.sum(WishlistItem.amount_funded).label("total_funded"),
            func.count(case((WishlistItem.is_priority.is_(True), 1))).label(
                "priority_items"
            ),
            func.count(
                case((WishlistItem.amount_funded >= WishlistItem.price, 1))
            ).label("funded_items"),
        )
    )
    return WishlistStats(
        **shape_row(
            row or {},
            money=("total_value", "total_funded"),
            counts=("total_items", "priority_items", "funded_items"),
        )
    )


async def get_dashboard_stats(executor: QueryExecutor) -> DashboardStatsResponse:
    total_creators = await executor.scalar(
        select(func.count(distinct(Profile.id))).where(_is_creator()), default=0
    )
    active_creators = await executor.scalar(
        select(func.count(distinct(Profile.id)))
        .select_from(Profile)
        .join(Supporter, Profile.user_id == Supporter.creator_id)
        .where(
            _is_creator(), status_is(Supporter.status, PaymentStatus.COMPLETED)
        ),
        default=0,
    )
    total_revenue = await executor.scalar(
        select(func.coalesce(func.sum(Supporter.amount), 0)).where(
            status_is(Supporter.status, PaymentStatus.COMPLETED)
        ),
        default=0,
    )
    total_paid_out = await executor.scalar(
        sum_withdrawals_query(PaymentStatus.COMPLETED), default=0
    )
    pending_payouts = await executor.scalar(
        sum_withdrawals_query(PaymentStatus.PENDING), default=0
    )
    total_supporters = await executor.scalar(
        select(func.count(distinct(Supporter.id))).where(
            status_is(Supporter.status, PaymentStatus.COMPLETED)
        ),
        default=0,
    )
    wishlist = await _wishlist_stats(executor)

    since = chart_window_start()
    revenue_series = await _monthly_revenue(executor, since)
    creator_series = await _monthly_new_creators(executor, since)

    return DashboardStatsResponse(
        total_creators=to_count(total_creators),
        active_creators=to_count(active_creators),
        total_revenue=to_amount(total_revenue),
        total_paid_out=to_amount(total_paid_out),
        pending_payouts=to_amount(pending_payouts),
        total_supporters=to_count(total_supporters),
        wishlist=wishlist,
        growth=GrowthStats(
            revenue=revenue_growth([point["revenue"] for point in revenue_series])
        ),
        charts=DashboardCharts(
            revenue=ChartSeries(
                labels=[month_label(point["month"]) for point in revenue_series],
                data=[float(point["revenue"]) for point in revenue_series],
            ),
            creators=ChartSeries(
                labels=[month_label(point["month"]) for point in creator_series],
                data=[point["new_creators"] for point in creator_series],
            ),
        ),
    )
