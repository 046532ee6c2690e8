"""Request/response schemas for catalog item endpoints."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ItemCreate(BaseModel):
    """Body for POST /productos."""

    nombre: str = Field(..., min_length=1, max_length=255)
    descripcion: str = Field(..., min_length=1)
    precio: float = Field(..., ge=0)
    stock: int = Field(default=0, ge=0)
    categoria: str = Field(..., min_length=1, max_length=255)


class ItemUpdate(BaseModel):
    """Body for PUT /productos/{id}; partial."""

    nombre: str | None = Field(default=None, min_length=1, max_length=255)
    descripcion: str | None = Field(default=None, min_length=1)
    precio: float | None = Field(default=None, ge=0)
    stock: int | None = Field(default=None, ge=0)
    categoria: str | None = Field(default=None, min_length=1, max_length=255)


class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"), serialization_alias="_id")
    nombre: str
    descripcion: str
    precio: float
    stock: int
    categoria: str
