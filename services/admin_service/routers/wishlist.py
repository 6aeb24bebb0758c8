from fastapi import APIRouter, Depends
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.executor import QueryExecutor
from libs.db.session import get_executor
from services.admin_service.schemas import WishlistItemResponse
from services.admin_service.services.wishlist import list_wishlist

router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


@router.get("", response_model=list[WishlistItemResponse])
async def get_wishlist(
    _admin: AuthUser = Depends(get_current_user),
    executor: QueryExecutor = Depends(get_executor),
):
    return await list_wishlist(executor)
