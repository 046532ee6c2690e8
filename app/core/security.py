"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.errors import TokenExpired, TokenMalformed, TokenSignatureInvalid
from app.core.policy import Role
from app.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

REQUIRED_CLAIMS = ["sub", "role", "iat", "exp"]


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """
    Hash a plain-text password for storage with a fresh random salt.

    The returned record encodes its own cost factor, so hashes made under an
    older BCRYPT_ROUNDS value still verify. Raises ValueError on empty input.
    """
    if not plain_password:
        raise ValueError("Password must be a non-empty string")
    cost = rounds if rounds is not None else settings.BCRYPT_ROUNDS
    salt = bcrypt.gensalt(rounds=cost)
    return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Mismatch is False, never an error."""
    if not plain_password or not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False


def hash_cost(hashed: str) -> int | None:
    """Return the cost factor embedded in a bcrypt record ($2b$<cost>$...)."""
    parts = hashed.split("$")
    if len(parts) < 4:
        return None
    try:
        return int(parts[2])
    except ValueError:
        return None


def needs_rehash(hashed: str) -> bool:
    """True when the stored hash was made with a different cost than configured."""
    return hash_cost(hashed) != settings.BCRYPT_ROUNDS


@lru_cache
def _dummy_hash() -> str:
    return hash_password("timing-equalization-placeholder")


def burn_password_check(plain_password: str) -> None:
    """Spend one bcrypt verification so a lookup miss costs as much as a mismatch."""
    verify_password(plain_password or "x", _dummy_hash())


def issue_access_token(
    account_id: str,
    role: Role,
    ttl: timedelta | None = None,
    *,
    secret: str | None = None,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT carrying sub (account id), role, iat and exp."""
    issued_at = now or datetime.now(UTC)
    lifetime = ttl if ttl is not None else timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(account_id),
        "role": Role(role).value,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    key = secret if secret is not None else settings.JWT_SECRET.get_secret_value()
    return jwt.encode(payload, key, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str, *, secret: str | None = None) -> TokenClaims:
    """
    Validate signature and expiry and return the embedded claims.

    Raises TokenSignatureInvalid, TokenExpired or TokenMalformed. PyJWT checks
    the signature before any claim, so an expired token signed with another
    key is reported as a signature failure.
    """
    key = secret if secret is not None else settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
            leeway=0,
        )
    except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as e:
        raise TokenSignatureInvalid() from e
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired() from e
    except jwt.PyJWTError as e:
        raise TokenMalformed() from e

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        raise TokenMalformed("Token subject is missing")
    try:
        role = Role(payload.get("role"))
    except ValueError as e:
        raise TokenMalformed("Token role is not recognised") from e
    try:
        issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=UTC)
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
    except (TypeError, ValueError, OverflowError) as e:
        raise TokenMalformed("Token timestamps are invalid") from e
    return TokenClaims(
        account_id=sub,
        role=role,
        issued_at=issued_at,
        expires_at=expires_at,
    )
