from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from services.admin_service.schemas.common import Money


class WithdrawalResponse(BaseModel):
    id: int
    creator_id: int
    creator_name: Optional[str] = None
    amount: Money
    status: str  # upper-cased; normally one of PaymentStatus
    payment_method: Optional[str] = None
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class WithdrawalSummary(BaseModel):
    """Whole-table totals, independent of the listed rows."""

    total_withdrawn: Money
    pending_withdrawals: Money


class WithdrawalListResponse(BaseModel):
    withdrawals: list[WithdrawalResponse]
    summary: WithdrawalSummary


class WithdrawalStatusUpdate(BaseModel):
    """Requested status, matched case-insensitively.

    Left as a plain string so an unknown value is answered with a 400 by the
    transition check instead of a schema error.
    """

    status: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
