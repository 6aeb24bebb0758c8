from typing import Optional

from pydantic import BaseModel


class AuthUser(BaseModel):
    """
    The admin identified by a verified bearer token.
    Built from the token claims on every request, never from client state.
    """

    id: int
    email: str
    name: Optional[str] = None
