"""Domain errors raised by the auth core and stores; routes map them to HTTP statuses."""


class AppError(Exception):
    """Base class for errors with a client-safe message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuthenticationError(AppError):
    """Bearer token missing or rejected. Every subclass maps to the same 401."""

    kind = "authentication_failed"


class MissingToken(AuthenticationError):
    kind = "missing_token"

    def __init__(self, message: str = "Bearer token not provided") -> None:
        super().__init__(message)


class TokenMalformed(AuthenticationError):
    kind = "token_malformed"

    def __init__(self, message: str = "Token could not be parsed") -> None:
        super().__init__(message)


class TokenSignatureInvalid(AuthenticationError):
    kind = "token_signature_invalid"

    def __init__(self, message: str = "Token signature mismatch") -> None:
        super().__init__(message)


class TokenExpired(AuthenticationError):
    kind = "token_expired"

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class InvalidCredentials(AppError):
    """Login failed. Raised for unknown accounts and wrong passwords alike."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class Forbidden(AppError):
    """Authenticated, but the role may not perform the requested action."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class NotFound(AppError):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class DuplicateCredentialField(AppError):
    """Unique credential field (correo) already used by another account."""

    def __init__(self, message: str = "An account with this email already exists") -> None:
        super().__init__(message)
