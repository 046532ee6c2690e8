"""Account write path: passwords are hashed before anything reaches the store."""

import logging

from app.core.errors import NotFound
from app.core.security import hash_password
from app.models import Account
from app.schemas.accounts import AccountCreate, AccountUpdate
from app.services.account_store import AccountStore

logger = logging.getLogger(__name__)


def create_account(store: AccountStore, body: AccountCreate) -> Account:
    """Persist a new account. Raises DuplicateCredentialField if correo is taken."""
    account = Account(
        nombre=body.nombre,
        correo=body.correo,
        password_hash=hash_password(body.password),
        rol=body.rol,
    )
    saved = store.save(account)
    logger.info("Account created", extra={"account_id": saved.id, "role": saved.rol.value})
    return saved


def update_account(store: AccountStore, account_id: str, body: AccountUpdate) -> Account:
    """
    Apply a partial update.

    A supplied password is rehashed; an omitted one leaves the stored hash
    untouched. Raises NotFound or DuplicateCredentialField.
    """
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    password = changes.pop("password", None)
    if password is not None:
        changes["password_hash"] = hash_password(password)

    if changes:
        account = store.update(account_id, changes)
    else:
        account = store.find_by_id(account_id)
    if account is None:
        raise NotFound("User not found")
    logger.info(
        "Account updated",
        extra={"account_id": account_id, "fields": ",".join(sorted(changes))},
    )
    return account


def delete_account(store: AccountStore, account_id: str) -> None:
    if not store.delete(account_id):
        raise NotFound("User not found")
    logger.info("Account deleted", extra={"account_id": account_id})
