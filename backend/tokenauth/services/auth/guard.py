"""
Request-level authentication gate.

Resolves an ``Authorization`` header to the public identity of its subject, or
to a :class:`RejectReason`. Single pass, no retries, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tokenauth.services._shared.ports import CredentialStore, KeyKind, TokenCodec, VerifyStatus
from tokenauth.services.identity.dto import UserPublicOut

BEARER_SCHEME = "bearer"


class RejectReason(Enum):
    """Why a request was not authenticated."""

    NO_TOKEN = "no_token"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    USER_NOT_FOUND = "user_not_found"


@dataclass(frozen=True, slots=True)
class GuardOutcome:
    """
    Terminal state of :meth:`AuthGuard.authenticate`.

    Exactly one of ``identity`` (authenticated) or ``reason`` (rejected) is set.
    """

    identity: UserPublicOut | None = None
    reason: RejectReason | None = None

    @property
    def authenticated(self) -> bool:
        return self.identity is not None


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Return the token from an ``Authorization: Bearer <token>`` header value.

    The scheme is matched case-insensitively; anything other than exactly a
    scheme and one non-empty credential yields ``None``.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


class AuthGuard:
    """Verify an access token and resolve its subject through the store."""

    def __init__(self, *, store: CredentialStore, codec: TokenCodec) -> None:
        self.store = store
        self.codec = codec

    def authenticate(self, authorization: str | None) -> GuardOutcome:
        token = extract_bearer_token(authorization)
        if token is None:
            return GuardOutcome(reason=RejectReason.NO_TOKEN)

        result = self.codec.verify(token, KeyKind.ACCESS)
        if result.status is VerifyStatus.EXPIRED:
            return GuardOutcome(reason=RejectReason.TOKEN_EXPIRED)
        if result.status is VerifyStatus.INVALID or result.subject is None:
            return GuardOutcome(reason=RejectReason.TOKEN_INVALID)

        user = self.store.find_by_id(result.subject)
        if user is None:
            return GuardOutcome(reason=RejectReason.USER_NOT_FOUND)
        return GuardOutcome(identity=user.to_public())
