from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from services.admin_service.schemas.common import Money


class SupporterResponse(BaseModel):
    id: int
    name: Optional[str] = None
    phone: Optional[str] = None
    amount: Money
    status: str  # upper-cased; normally one of PaymentStatus
    creator_name: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
