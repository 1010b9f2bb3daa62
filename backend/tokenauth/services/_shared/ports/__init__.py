"""
tokenauth.services._shared.ports
================================

Collection of *ports* (hexagonal interfaces) that define the contracts for
token handling, credential storage, and password hashing.

These ports decouple the service layer from concrete implementations.

Modules
-------
- :mod:`token_codec`:
    Defines :class:`~.TokenCodec`, :class:`~.KeyKind`, :class:`~.AuthResult`
    and :class:`~.VerifyStatus`: signing and fail-closed verification.

- :mod:`credential_store`:
    Defines :class:`~.CredentialStore`: users plus bounded refresh-token lists.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`: opaque hash/verify capability.

Design Notes
------------
Concrete adapters (PyJWT codec, in-memory store, Werkzeug hasher) live under
``tokenauth.infra``.
"""

from __future__ import annotations

from .credential_store import CredentialStore
from .password_hasher import PasswordHasher
from .token_codec import AuthResult, KeyKind, TokenCodec, VerifyStatus

__all__ = [
    "AuthResult",
    "CredentialStore",
    "KeyKind",
    "PasswordHasher",
    "TokenCodec",
    "VerifyStatus",
]
