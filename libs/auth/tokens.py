"""Admin credential checks and bearer token issuance."""

from datetime import timedelta
from typing import Any, Optional

import bcrypt
from jose import jwt

from libs.common.config import get_settings
from libs.common.datetime_utils import utc_now


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """Compare a plaintext password with a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(claims: dict[str, Any]) -> str:
    """Sign ``claims`` into a JWT that expires after JWT_EXPIRES_MINUTES."""
    settings = get_settings()
    now = utc_now()
    payload = {
        **claims,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry. Raises ``jose.JWTError`` on failure."""
    settings = get_settings()
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
