"""Catalog item persistence."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models import Item

UPDATABLE_FIELDS = frozenset({"nombre", "descripcion", "precio", "stock", "categoria"})


class ItemStore:
    """Repository over the productos table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Item]:
        return list(self.session.scalars(select(Item).order_by(Item.nombre)))

    def find_by_id(self, item_id: str) -> Item | None:
        return self.session.get(Item, item_id)

    def save(self, item: Item) -> Item:
        self.session.add(item)
        self.session.commit()
        return item

    def update(self, item_id: str, fields: dict[str, Any]) -> Item | None:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update item fields: {', '.join(sorted(unknown))}")
        item = self.find_by_id(item_id)
        if item is None:
            return None
        for name, value in fields.items():
            setattr(item, name, value)
        self.session.commit()
        return item

    def delete(self, item_id: str) -> bool:
        item = self.find_by_id(item_id)
        if item is None:
            return False
        self.session.delete(item)
        self.session.commit()
        return True
