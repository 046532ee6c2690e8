"""Request/response schemas for account endpoints. No schema here carries a password hash."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.core.policy import Role

# Min/max lengths for login handle and password validation.
CORREO_MIN_LEN = 3
CORREO_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def normalise_correo(value: str) -> str:
    """Return the canonical correo used for storage and login lookup."""
    return value.strip().lower()


def _clean_correo(value: str) -> str:
    """Normalise, then length-check, so padding cannot satisfy the minimum."""
    value = normalise_correo(value)
    if not (CORREO_MIN_LEN <= len(value) <= CORREO_MAX_LEN):
        raise ValueError(
            f"correo must be {CORREO_MIN_LEN}-{CORREO_MAX_LEN} characters after trimming"
        )
    return value


class AccountCreate(BaseModel):
    """Body for POST /usuarios."""

    nombre: str = Field(..., min_length=1, max_length=255)
    correo: str
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    rol: Role = Role.STANDARD

    @field_validator("correo")
    @classmethod
    def clean_correo(cls, v: str) -> str:
        return _clean_correo(v)


class AccountUpdate(BaseModel):
    """Body for PUT /usuarios/{id}; every field optional, omitted fields stay as they are."""

    nombre: str | None = Field(default=None, min_length=1, max_length=255)
    correo: str | None = None
    password: str | None = Field(default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    rol: Role | None = None

    @field_validator("correo")
    @classmethod
    def clean_correo(cls, v: str | None) -> str | None:
        return None if v is None else _clean_correo(v)


class AccountOut(BaseModel):
    """Account as returned to clients. The id is exposed as _id."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"), serialization_alias="_id")
    nombre: str
    correo: str
    rol: Role


class MessageResponse(BaseModel):
    message: str
