"""Request/response schemas for login and the authenticated principal."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.core.policy import Role
from app.schemas.accounts import CORREO_MAX_LEN, PASSWORD_MAX_LEN


class LoginRequest(BaseModel):
    """Credentials for login."""

    correo: str = Field(..., min_length=1, max_length=CORREO_MAX_LEN, description="Account email / login handle")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class LoginResponse(BaseModel):
    """Signed bearer token returned after successful login, plus the caller's role."""

    token: str = Field(..., description="JWT access token")
    rol: Role = Field(..., description="Role of the authenticated account")


class TokenClaims(BaseModel):
    """Verified contents of a session token."""

    account_id: str
    role: Role
    issued_at: datetime
    expires_at: datetime


class Principal(BaseModel):
    """Authenticated identity attached to the current request."""

    account_id: str
    role: Role
