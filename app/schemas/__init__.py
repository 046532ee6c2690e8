"""Pydantic request/response schemas."""

from app.schemas.accounts import (
    AccountCreate,
    AccountOut,
    AccountUpdate,
    MessageResponse,
)
from app.schemas.auth import LoginRequest, LoginResponse, Principal, TokenClaims
from app.schemas.health import HealthResponse
from app.schemas.items import ItemCreate, ItemOut, ItemUpdate

__all__ = [
    "AccountCreate",
    "AccountOut",
    "AccountUpdate",
    "HealthResponse",
    "ItemCreate",
    "ItemOut",
    "ItemUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "Principal",
    "TokenClaims",
]
