"""Creator listing with earnings derived from completed pledges."""

from libs.db.executor import QueryExecutor
from services.admin_service.models import (
    PaymentStatus,
    Profile,
    Supporter,
    User,
    status_is,
)
from services.admin_service.schemas import CreatorResponse
from services.admin_service.services.shaping import shape_row
from sqlalchemy import and_, distinct, func, select

PROFILE_COLUMNS = (
    Profile.id,
    Profile.user_id,
    Profile.username,
    Profile.display_name,
    Profile.creator_url,
    Profile.avatar_url,
    Profile.bio,
    Profile.category,
    Profile.website,
    Profile.created_at,
)


def creators_query():
    # Pending/failed pledges are excluded in the join condition, not in a
    # WHERE clause, so creators without completed pledges still get a row.
    return (
        select(
            *PROFILE_COLUMNS,
            User.email,
            User.email_verified,
            func.coalesce(func.sum(Supporter.amount), 0).label("total_earnings"),
            func.count(distinct(Supporter.id)).label("total_supporters"),
        )
        .select_from(Profile)
        .outerjoin(User, Profile.user_id == User.id)
        .outerjoin(
            Supporter,
            and_(
                Profile.user_id == Supporter.creator_id,
                status_is(Supporter.status, PaymentStatus.COMPLETED),
            ),
        )
        .group_by(*PROFILE_COLUMNS, User.email, User.email_verified)
        .order_by(Profile.id)
    )


async def list_creators(executor: QueryExecutor) -> list[CreatorResponse]:
    rows = await executor.fetch_all(creators_query())
    return [
        CreatorResponse(
            **shape_row(
                row,
                money=("total_earnings",),
                counts=("total_supporters",),
                flags=("email_verified",),
            )
        )
        for row in rows
    ]
