"""SQLAlchemy ORM models."""

from app.models.account import Account
from app.models.base import Base
from app.models.item import Item

__all__ = ["Account", "Base", "Item"]
