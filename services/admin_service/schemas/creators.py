from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from services.admin_service.schemas.common import Money


class CreatorResponse(BaseModel):
    """A creator profile with earnings folded in from completed pledges."""

    id: int
    user_id: int
    username: str
    display_name: Optional[str] = None
    creator_url: Optional[str] = None
    category: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    created_at: Optional[datetime] = None
    email: Optional[str] = None
    email_verified: bool = False
    total_earnings: Money
    total_supporters: int
