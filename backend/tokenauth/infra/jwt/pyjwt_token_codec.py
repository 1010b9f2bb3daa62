# tokenauth/infra/jwt/pyjwt_token_codec.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any, cast
from uuid import uuid4

import jwt

from tokenauth.services._shared.ports import AuthResult, KeyKind, TokenCodec

log = logging.getLogger(__name__)

_REQUIRED_CLAIMS = ["sub", "exp", "iat", "jti", "type"]

# Keys are shared secrets: HMAC only.
ALLOWED_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})


@dataclass(frozen=True, slots=True)
class SigningKey:
    """Secret and lifetime for one token class."""

    secret: str = field(repr=False)
    expires: timedelta


@dataclass(slots=True)
class PyJWTTokenCodec(TokenCodec):
    """
    HMAC-signed JWT codec with one key per token class.

    :param access: Key and lifetime for access tokens.
    :param refresh: Key and lifetime for refresh tokens.
    :param algorithm: The only algorithm emitted and accepted.

    .. note::
       Every token carries a random ``jti`` so two tokens minted for the same
       subject in the same second are still distinct strings.
    """

    access: SigningKey
    refresh: SigningKey
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        if self.algorithm not in ALLOWED_ALGORITHMS:
            raise ValueError(
                f"Unsupported JWT algorithm {self.algorithm!r}; "
                f"expected one of {sorted(ALLOWED_ALGORITHMS)}."
            )

    @classmethod
    def from_config(cls, config: Any) -> PyJWTTokenCodec:
        """Build the codec from a Flask config mapping.

        :raises ValueError: If ``JWT_ALGORITHM`` is not an HMAC algorithm.
        """
        return cls(
            access=SigningKey(
                secret=config["ACCESS_TOKEN_SECRET"],
                expires=config["ACCESS_TOKEN_EXPIRES"],
            ),
            refresh=SigningKey(
                secret=config["REFRESH_TOKEN_SECRET"],
                expires=config["REFRESH_TOKEN_EXPIRES"],
            ),
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
        )

    # ------------------------- helpers -------------------------

    def _key(self, kind: KeyKind) -> SigningKey:
        return self.access if kind is KeyKind.ACCESS else self.refresh

    def _sign(self, subject_id: int | str, kind: KeyKind) -> str:
        key = self._key(kind)
        now = datetime.now(UTC)
        payload = {
            # PyJWT requires a string subject.
            "sub": str(subject_id),
            "type": kind.value,
            "jti": uuid4().hex,
            "iat": now,
            "exp": now + key.expires,
        }
        return jwt.encode(payload, key.secret, algorithm=self.algorithm)

    # -------------------------- API ----------------------------

    def sign_access(self, subject_id: int | str) -> str:
        return self._sign(subject_id, KeyKind.ACCESS)

    def sign_refresh(self, subject_id: int | str) -> str:
        return self._sign(subject_id, KeyKind.REFRESH)

    def verify(self, token: str, key_kind: KeyKind) -> AuthResult:
        if not isinstance(token, str) or not token:
            return AuthResult.invalid()
        try:
            claims = cast(
                dict[str, Any],
                jwt.decode(
                    token,
                    self._key(key_kind).secret,
                    algorithms=[self.algorithm],
                    options={"require": _REQUIRED_CLAIMS},
                ),
            )
        except jwt.ExpiredSignatureError:
            # Raised only after the signature has been checked.
            return AuthResult.expired()
        except jwt.InvalidTokenError as exc:
            log.debug("token.verify.invalid", extra={"event": type(exc).__name__})
            return AuthResult.invalid()

        if claims.get("type") != key_kind.value:
            return AuthResult.invalid()
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            return AuthResult.invalid()
        return AuthResult.valid(subject)
