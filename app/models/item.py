"""ORM model for catalog items (productos)."""

from sqlalchemy import Column, Float, Integer, String, Text

from app.models.account import new_id
from app.models.base import Base


class Item(Base):
    """Catalog item. No owner: every authenticated role reads, admins write."""

    __tablename__ = "productos"

    id = Column(String(32), primary_key=True, default=new_id)
    nombre = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=False)
    precio = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    categoria = Column(String(255), nullable=False, index=True)
