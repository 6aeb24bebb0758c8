from fastapi import APIRouter, Depends
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.common.logging import get_logger
from libs.db.executor import QueryExecutor
from libs.db.session import get_executor
from services.admin_service.schemas import (
    MessageResponse,
    WithdrawalListResponse,
    WithdrawalStatusUpdate,
)
from services.admin_service.services.withdrawals import (
    list_withdrawals,
    update_withdrawal_status,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/api/withdrawals", tags=["withdrawals"])


@router.get("", response_model=WithdrawalListResponse)
async def get_withdrawals(
    _admin: AuthUser = Depends(get_current_user),
    executor: QueryExecutor = Depends(get_executor),
):
    """Withdrawals newest first, plus paid-out and pending totals."""
    return await list_withdrawals(executor)


@router.put("/{withdrawal_id}/status", response_model=MessageResponse)
async def put_withdrawal_status(
    withdrawal_id: int,
    data: WithdrawalStatusUpdate,
    admin: AuthUser = Depends(get_current_user),
    executor: QueryExecutor = Depends(get_executor),
):
    """Set a withdrawal's status. Any status may follow any other."""
    new_status = await update_withdrawal_status(executor, withdrawal_id, data.status)
    logger.info(
        "Withdrawal %s set to %s by %s", withdrawal_id, new_status.value, admin.email
    )
    return MessageResponse(message="Status updated successfully")
