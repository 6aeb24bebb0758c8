from fastapi import APIRouter, Depends
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.executor import QueryExecutor
from libs.db.session import get_executor
from services.admin_service.schemas import SupporterResponse
from services.admin_service.services.supporters import list_supporters

router = APIRouter(prefix="/api/supporters", tags=["supporters"])


@router.get("", response_model=list[SupporterResponse])
async def get_supporters(
    _admin: AuthUser = Depends(get_current_user),
    executor: QueryExecutor = Depends(get_executor),
):
    """All supporter pledges, most recent first."""
    return await list_supporters(executor)
