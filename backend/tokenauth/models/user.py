"""User record held by the in-memory credential store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from tokenauth.services.identity.dto import UserPublicOut


@dataclass(slots=True)
class User:
    """
    Authentication identity plus its currently valid refresh tokens.

    Fields
    ------
    id : int
        Sequential identifier assigned by the store.
    username : str
        Public handle. Unique per store.
    email : str
        Login email. Unique per store.
    password_digest : str
        Opaque hash; never leaves the store.
    refresh_tokens : list[str]
        Refresh tokens in issue order, oldest first. The store bounds its
        length and is the only writer.
    created_at : datetime
        Registration timestamp (UTC).
    """

    id: int
    username: str
    email: str
    password_digest: str = field(repr=False)
    refresh_tokens: list[str] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_public(self) -> UserPublicOut:
        """Project the record onto its public-safe view."""
        return UserPublicOut(id=self.id, username=self.username, email=self.email)
