"""Supporter pledges, newest first."""

from libs.db.executor import QueryExecutor
from services.admin_service.models import Profile, Supporter
from services.admin_service.schemas import SupporterResponse
from services.admin_service.services.shaping import shape_row
from sqlalchemy import select


def supporters_query():
    return (
        select(
            Supporter.id,
            Supporter.name,
            Supporter.phone,
            Supporter.amount,
            Supporter.status,
            Supporter.created_at,
            Supporter.updated_at,
            Profile.display_name.label("creator_name"),
        )
        .outerjoin(Profile, Supporter.creator_id == Profile.user_id)
        .order_by(Supporter.created_at.desc())
    )


async def list_supporters(executor: QueryExecutor) -> list[SupporterResponse]:
    rows = await executor.fetch_all(supporters_query())
    return [
        SupporterResponse(**shape_row(row, money=("amount",), statuses=("status",)))
        for row in rows
    ]
