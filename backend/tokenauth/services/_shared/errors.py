"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
helpers. Each carries a member of :class:`ErrorKind`, a closed enumeration
that the HTTP boundary (``tokenauth/core/errors.py``) maps to status codes.
The service layer itself never knows about status codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds surfaced by the service layer."""

    VALIDATION = "validation_error"
    ALREADY_EXISTS = "already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_REVOKED = "token_revoked"
    NOT_FOUND = "not_found"


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - Subclasses pin :attr:`kind`; the boundary layer decides the response.
    """

    kind: ErrorKind = ErrorKind.VALIDATION


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class ValidationError(ServiceError):
    """Raised when input is malformed beyond what schema validation catches."""

    kind = ErrorKind.VALIDATION


@dataclass(slots=True)
class AlreadyExistsError(ServiceError):
    """
    Raised when registration collides with an existing username or email.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param field: Colliding field name.
    :type field: str
    """

    entity: str
    field: str
    kind = ErrorKind.ALREADY_EXISTS

    def __str__(self) -> str:
        return f"{self.entity} {self.field} already in use"


class InvalidCredentialsError(ServiceError):
    """Raised on login failure; identical for unknown user and wrong password."""

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class TokenInvalidError(ServiceError):
    """Token failed signature/format checks."""

    kind = ErrorKind.TOKEN_INVALID

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class TokenExpiredError(ServiceError):
    """Token signature is valid but its validity window has passed."""

    kind = ErrorKind.TOKEN_EXPIRED

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class TokenRevokedError(ServiceError):
    """Well-formed, unexpired refresh token no longer held by its subject."""

    kind = ErrorKind.TOKEN_REVOKED

    def __init__(self, message: str = "Token has been revoked") -> None:
        super().__init__(message)


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int
    kind = ErrorKind.NOT_FOUND

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"
