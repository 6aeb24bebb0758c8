from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from services.admin_service.schemas.common import Money


class WishlistItemResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    link: Optional[str] = None
    hashtags: Optional[str] = None
    price: Money
    amount_funded: Money
    is_priority: bool
    is_funded: bool
    images: list[str]
    created_at: datetime
