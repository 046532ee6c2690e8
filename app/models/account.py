"""ORM model for accounts (authentication and role-based access control)."""

import uuid

from sqlalchemy import Column, Enum, String

from app.core.policy import Role
from app.models.base import Base


def new_id() -> str:
    """Opaque identifier assigned on insert."""
    return uuid.uuid4().hex


class Account(Base):
    """
    Account that can log in and receive a bearer token.

    correo is the unique login handle. password_hash is write-only from the
    API's point of view and never leaves the service.
    """

    __tablename__ = "usuarios"

    id = Column(String(32), primary_key=True, default=new_id)
    nombre = Column(String(255), nullable=False, default="")
    correo = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    rol = Column(
        Enum(Role, name="rol", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Role.STANDARD,
    )

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, correo={self.correo!r}, rol={self.rol!r})"
