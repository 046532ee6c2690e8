"""Login endpoint: the only unauthenticated route besides health."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_account_store
from app.core.errors import InvalidCredentials
from app.schemas.auth import LoginRequest, LoginResponse
from app.services.account_store import AccountStore
from app.services.auth import authenticate

router = APIRouter()


@router.post("", response_model=LoginResponse)
def login(
    body: LoginRequest,
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> LoginResponse:
    """
    Authenticate with correo and password; returns a JWT and the account's role.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        return authenticate(store, body.correo, body.password)
    except InvalidCredentials as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
