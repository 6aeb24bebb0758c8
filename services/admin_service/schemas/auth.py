from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Optional so missing fields get the 400 from the login handler
    email: Optional[str] = None
    password: Optional[str] = None


class AdminUserResponse(BaseModel):
    id: int
    email: str
    name: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    user: AdminUserResponse
