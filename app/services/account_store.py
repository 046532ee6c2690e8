"""Credential store: SQLAlchemy persistence for accounts.

Routes and services never query the usuarios table directly; they go
through AccountStore, which is built per request around the request's Session.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateCredentialField
from app.models import Account

logger = logging.getLogger(__name__)

# Columns that identify exactly one account.
UNIQUE_FIELDS = frozenset({"id", "correo"})

# Columns a caller may change through update().
UPDATABLE_FIELDS = frozenset({"nombre", "correo", "password_hash", "rol"})

# Unique index on usuarios.correo (see Base naming convention and the migration).
CORREO_UNIQUE_INDEX = "ix_usuarios_correo"


def _is_correo_conflict(error: IntegrityError) -> bool:
    """True if error is a violation of the correo unique index."""
    diag = getattr(error.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if constraint:
        return constraint == CORREO_UNIQUE_INDEX
    # Drivers without diagnostics (SQLite) only name the column in the message.
    message = str(error.orig).lower()
    return "correo" in message


class AccountStore:
    """Repository over the usuarios table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Account]:
        return list(self.session.scalars(select(Account).order_by(Account.correo)))

    def find_by_id(self, account_id: str) -> Account | None:
        return self.session.get(Account, account_id)

    def find_by_unique_field(self, field: str, value: Any) -> Account | None:
        """Look up one account by a unique column. Raises ValueError for non-unique columns."""
        if field not in UNIQUE_FIELDS:
            raise ValueError(f"{field!r} is not a unique account field")
        column = getattr(Account, field)
        return self.session.scalars(select(Account).where(column == value)).first()

    def find_by_correo(self, correo: str) -> Account | None:
        return self.find_by_unique_field("correo", correo)

    def save(self, account: Account) -> Account:
        """Insert a new account. Raises DuplicateCredentialField if correo is taken."""
        self.session.add(account)
        self._commit()
        return account

    def update(self, account_id: str, fields: dict[str, Any]) -> Account | None:
        """Apply a partial update. Returns None when the account does not exist."""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update account fields: {', '.join(sorted(unknown))}")
        account = self.find_by_id(account_id)
        if account is None:
            return None
        for name, value in fields.items():
            setattr(account, name, value)
        self._commit()
        return account

    def delete(self, account_id: str) -> bool:
        account = self.find_by_id(account_id)
        if account is None:
            return False
        self.session.delete(account)
        self.session.commit()
        return True

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            if isinstance(e, IntegrityError) and _is_correo_conflict(e):
                logger.info("Rejected account write: correo already in use")
                raise DuplicateCredentialField() from e
            raise
