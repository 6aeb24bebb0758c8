from fastapi import APIRouter, Depends
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.executor import QueryExecutor
from libs.db.session import get_executor
from services.admin_service.schemas import CreatorResponse
from services.admin_service.services.creators import list_creators

router = APIRouter(prefix="/api/creators", tags=["creators"])


@router.get("", response_model=list[CreatorResponse])
async def get_creators(
    _admin: AuthUser = Depends(get_current_user),
    executor: QueryExecutor = Depends(get_executor),
):
    """All creator profiles with completed earnings and supporter counts."""
    return await list_creators(executor)
