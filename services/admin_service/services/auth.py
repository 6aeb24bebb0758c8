"""Admin login."""

from fastapi import HTTPException, status
from libs.auth.tokens import create_access_token, verify_password
from libs.common.logging import get_logger
from libs.db.executor import QueryExecutor
from services.admin_service.models import AdminUser
from services.admin_service.schemas import AdminUserResponse, LoginResponse
from sqlalchemy import select

logger = get_logger(__name__)


async def authenticate_admin(
    executor: QueryExecutor, email: str, password: str
) -> LoginResponse:
    """Check credentials against ``admin_users`` and issue a bearer token.

    Unknown email, inactive account and wrong password all give the same 401.
    """
    admin = await executor.fetch_one(
        select(
            AdminUser.id, AdminUser.email, AdminUser.name, AdminUser.password_hash
        )
        .where(AdminUser.email == email, AdminUser.is_active.is_(True))
        .limit(1)
    )
    if admin is None or not verify_password(password, admin["password_hash"]):
        logger.warning("Failed admin login for %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )

    user = AdminUserResponse(id=admin["id"], email=admin["email"], name=admin["name"])
    token = create_access_token(user.model_dump())
    logger.info("Admin %s logged in", user.email)
    return LoginResponse(token=token, user=user)
