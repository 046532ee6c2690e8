"""Account CRUD (usuarios). Reads need a token; writes need the admin role."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_account_store, require_action
from app.core.errors import DuplicateCredentialField, NotFound
from app.core.policy import Action
from app.schemas.accounts import AccountCreate, AccountOut, AccountUpdate, MessageResponse
from app.schemas.auth import Principal
from app.services.account_store import AccountStore
from app.services.accounts import create_account, delete_account, update_account

router = APIRouter()


@router.get("", response_model=list[AccountOut])
def list_accounts(
    _principal: Annotated[Principal, Depends(require_action(Action.READ_ACCOUNT))],
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> list[AccountOut]:
    """List all accounts, without password hashes."""
    return [AccountOut.model_validate(a) for a in store.list_all()]


@router.post("", response_model=AccountOut, status_code=status.HTTP_201_CREATED)
def post_account(
    body: AccountCreate,
    _admin: Annotated[Principal, Depends(require_action(Action.CREATE_ACCOUNT))],
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountOut:
    """Create an account (admin only). The password is hashed before it is stored."""
    try:
        account = create_account(store, body)
    except DuplicateCredentialField as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    return AccountOut.model_validate(account)


@router.put("/{account_id}", response_model=AccountOut)
def put_account(
    account_id: str,
    body: AccountUpdate,
    _admin: Annotated[Principal, Depends(require_action(Action.UPDATE_ACCOUNT))],
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountOut:
    """Partially update an account (admin only). Omitting password keeps the current one."""
    try:
        account = update_account(store, account_id, body)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except DuplicateCredentialField as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    return AccountOut.model_validate(account)


@router.delete("/{account_id}", response_model=MessageResponse)
def remove_account(
    account_id: str,
    _admin: Annotated[Principal, Depends(require_action(Action.DELETE_ACCOUNT))],
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> MessageResponse:
    """Delete an account (admin only)."""
    try:
        delete_account(store, account_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return MessageResponse(message="User deleted successfully")
