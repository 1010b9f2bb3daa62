from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tokenauth.services.identity.dto import UserPublicOut

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from tokenauth.models.user import User


class CredentialStore(Protocol):
    """
    Registry of users and, per user, a bounded list of valid refresh tokens.

    All mutations are immediately visible to subsequent reads. Implementations
    shared between threads must serialize access.
    """

    def register(self, username: str, email: str, password: str) -> UserPublicOut:
        """
        Create a user and return its public projection.

        :raises AlreadyExistsError: When ``username`` or ``email`` is taken.
        """
        ...

    def find_by_credential(self, username_or_email: str) -> User | None: ...

    def find_by_id(self, user_id: int | str) -> User | None: ...

    def verify_password(self, plain: str, digest: str) -> bool:
        """Return ``False`` on mismatch; never raise."""
        ...

    def add_refresh_token(self, user_id: int | str, token: str) -> None:
        """Append ``token``, evicting the oldest one first when at capacity."""
        ...

    def remove_refresh_token(self, user_id: int | str, token: str) -> None: ...

    def has_refresh_token(self, user_id: int | str, token: str) -> bool: ...

    def list_all(self) -> list[UserPublicOut]: ...

    def count(self) -> int: ...
