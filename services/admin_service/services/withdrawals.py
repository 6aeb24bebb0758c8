"""Withdrawal listing, payout totals and the status transition."""

from typing import Optional

from fastapi import HTTPException, status
from libs.common.datetime_utils import utc_now
from libs.common.logging import get_logger
from libs.db.executor import QueryExecutor
from services.admin_service.models import (
    PaymentStatus,
    Profile,
    Withdrawal,
    status_is,
)
from services.admin_service.schemas import (
    WithdrawalListResponse,
    WithdrawalResponse,
    WithdrawalSummary,
)
from services.admin_service.services.shaping import shape_row, to_status
from sqlalchemy import func, select, update

logger = get_logger(__name__)

# Allowed moves between statuses. Deliberately permissive: any status may
# move to any status, including back from COMPLETED and to itself.
WITHDRAWAL_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    current: frozenset(PaymentStatus) for current in PaymentStatus
}


def withdrawals_query():
    return (
        select(
            Withdrawal.id,
            Withdrawal.creator_id,
            Withdrawal.amount,
            Withdrawal.status,
            Withdrawal.payment_method,
            Withdrawal.full_name,
            Withdrawal.phone_number,
            Withdrawal.bank_name,
            Withdrawal.account_number,
            Withdrawal.created_at,
            Withdrawal.updated_at,
            Profile.display_name.label("creator_name"),
        )
        .outerjoin(Profile, Withdrawal.creator_id == Profile.user_id)
        .order_by(Withdrawal.created_at.desc())
    )


def sum_withdrawals_query(withdrawal_status: PaymentStatus):
    return select(func.coalesce(func.sum(Withdrawal.amount), 0)).where(
        status_is(Withdrawal.status, withdrawal_status)
    )


async def get_withdrawal_summary(executor: QueryExecutor) -> WithdrawalSummary:
    """Totals over the whole table; not derived from any listed page."""
    total_withdrawn = await executor.scalar(
        sum_withdrawals_query(PaymentStatus.COMPLETED), default=0
    )
    pending = await executor.scalar(
        sum_withdrawals_query(PaymentStatus.PENDING), default=0
    )
    return WithdrawalSummary(
        **shape_row(
            {"total_withdrawn": total_withdrawn, "pending_withdrawals": pending},
            money=("total_withdrawn", "pending_withdrawals"),
        )
    )


async def list_withdrawals(executor: QueryExecutor) -> WithdrawalListResponse:
    rows = await executor.fetch_all(withdrawals_query())
    summary = await get_withdrawal_summary(executor)
    return WithdrawalListResponse(
        withdrawals=[
            WithdrawalResponse(
                **shape_row(row, money=("amount",), statuses=("status",))
            )
            for row in rows
        ],
        summary=summary,
    )


def parse_status(raw: Optional[str]) -> PaymentStatus:
    """Match a requested status case-insensitively; 400 when unknown or empty."""
    try:
        return PaymentStatus(to_status(raw))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status"
        )


async def update_withdrawal_status(
    executor: QueryExecutor, withdrawal_id: int, requested: Optional[str]
) -> PaymentStatus:
    """Move a withdrawal to ``requested`` and stamp ``updated_at``.

    Validation happens before any database access. Re-applying the current
    status succeeds.
    """
    target = parse_status(requested)

    stored = await executor.scalar(
        select(Withdrawal.status).where(Withdrawal.id == withdrawal_id)
    )
    if stored is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Withdrawal not found"
        )

    current = to_status(stored)
    try:
        allowed = WITHDRAWAL_TRANSITIONS[PaymentStatus(current)]
    except ValueError:
        # Status outside the vocabulary; any valid target repairs it
        allowed = frozenset(PaymentStatus)
    if target not in allowed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot move withdrawal from {current} to {target.value}",
        )

    await executor.execute_write(
        update(Withdrawal)
        .where(Withdrawal.id == withdrawal_id)
        .values(status=target.value, updated_at=utc_now())
    )
    logger.info("Withdrawal %s status %s -> %s", withdrawal_id, current, target.value)
    return target
