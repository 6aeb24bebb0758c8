from fastapi import APIRouter, Depends, HTTPException, status
from libs.db.executor import QueryExecutor
from libs.db.session import get_executor
from services.admin_service.schemas import LoginRequest, LoginResponse
from services.admin_service.services.auth import authenticate_admin

router = APIRouter(prefix="/api/admin", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    executor: QueryExecutor = Depends(get_executor),
):
    """Exchange admin email and password for a bearer token."""
    if not data.email or not data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required.",
        )
    return await authenticate_admin(executor, data.email, data.password)
