from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol


class KeyKind(Enum):
    """Which signing key (and token class) a token belongs to."""

    ACCESS = "access"
    REFRESH = "refresh"


class VerifyStatus(Enum):
    """Outcome of a token verification."""

    VALID = auto()
    EXPIRED = auto()
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class AuthResult:
    """
    Result of :meth:`TokenCodec.verify`.

    :ivar status: Verification outcome.
    :ivar subject: Token subject (user id as string); only set when ``VALID``.
    """

    status: VerifyStatus
    subject: str | None = None

    @classmethod
    def valid(cls, subject: str) -> AuthResult:
        return cls(status=VerifyStatus.VALID, subject=subject)

    @classmethod
    def expired(cls) -> AuthResult:
        return cls(status=VerifyStatus.EXPIRED)

    @classmethod
    def invalid(cls) -> AuthResult:
        return cls(status=VerifyStatus.INVALID)

    @property
    def is_valid(self) -> bool:
        return self.status is VerifyStatus.VALID


class TokenCodec(Protocol):
    """Port for signing and verifying compact, expiring bearer tokens."""

    def sign_access(self, subject_id: int | str) -> str: ...

    def sign_refresh(self, subject_id: int | str) -> str: ...

    def verify(self, token: str, key_kind: KeyKind) -> AuthResult:
        """
        Verify ``token`` against the key for ``key_kind``.

        Must never raise for bad input: anything that is not a well-signed
        token of the right kind is ``INVALID``, unless the only defect is an
        elapsed expiry, which is ``EXPIRED``.
        """
        ...
