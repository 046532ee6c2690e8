"""Auth dependencies shared by every protected router (get_current_principal, require_action)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AuthenticationError, MissingToken
from app.core.policy import Action, can_perform
from app.core.security import verify_access_token
from app.schemas.auth import Principal
from app.services.account_store import AccountStore
from app.services.item_store import ItemStore

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)

# One body for every authentication failure so clients cannot tell which check failed.
AUTHENTICATION_REQUIRED = "Authentication required"
FORBIDDEN = "Forbidden"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=AUTHENTICATION_REQUIRED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Principal:
    """
    Dependency: require a valid Bearer JWT and return the caller's identity.

    Stateless: the token's signature and expiry decide, no store lookup. The
    principal is also put on request.state for the rest of this request only.
    """
    try:
        if credentials is None or not credentials.credentials:
            raise MissingToken()
        claims = verify_access_token(credentials.credentials)
    except AuthenticationError as e:
        logger.info(
            "Authentication failed",
            extra={"kind": e.kind, "path": request.url.path},
        )
        raise _unauthorized() from e

    principal = Principal(account_id=claims.account_id, role=claims.role)
    request.state.principal = principal
    return principal


def require_action(action: Action) -> Callable[..., Principal]:
    """Build a dependency that authenticates, then allows only roles permitted to perform action."""

    def _check(
        principal: Annotated[Principal, Depends(get_current_principal)],
    ) -> Principal:
        if not can_perform(principal.role, action):
            logger.info(
                "Authorization denied",
                extra={"role": principal.role.value, "action": action.value},
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN)
        return principal

    return _check


def get_account_store(db: Annotated[Session, Depends(get_db)]) -> AccountStore:
    return AccountStore(db)


def get_item_store(db: Annotated[Session, Depends(get_db)]) -> ItemStore:
    return ItemStore(db)
