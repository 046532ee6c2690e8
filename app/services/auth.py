"""Login: exchange correo + password for a signed session token."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import InvalidCredentials
from app.core.security import (
    burn_password_check,
    hash_password,
    issue_access_token,
    needs_rehash,
    verify_password,
)
from app.schemas.accounts import normalise_correo
from app.schemas.auth import LoginResponse
from app.services.account_store import AccountStore

logger = logging.getLogger(__name__)


def authenticate(store: AccountStore, correo: str, password: str) -> LoginResponse:
    """
    Verify credentials and issue a token.

    Unknown correo and wrong password raise the same InvalidCredentials, and
    both pay for one bcrypt check, so neither the response nor its timing
    tells a caller whether the account exists.
    """
    account = store.find_by_correo(normalise_correo(correo))
    if account is None:
        burn_password_check(password)
        logger.info("Login rejected", extra={"reason": "unknown_account"})
        raise InvalidCredentials()
    if not verify_password(password, account.password_hash):
        logger.info("Login rejected", extra={"reason": "password_mismatch"})
        raise InvalidCredentials()

    account_id, role = account.id, account.rol
    if needs_rehash(account.password_hash):
        try:
            store.update(account_id, {"password_hash": hash_password(password)})
            logger.info("Upgraded password hash cost on login")
        except SQLAlchemyError:
            # The old hash still verifies; retry on the next login.
            logger.warning("Password hash upgrade failed", exc_info=True)

    token = issue_access_token(account_id, role)
    logger.info("Login succeeded", extra={"role": role.value})
    return LoginResponse(token=token, rol=role)
