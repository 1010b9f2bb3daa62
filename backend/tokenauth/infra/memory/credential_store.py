# comments in English; reST docstrings
from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import replace

from tokenauth.models.user import User
from tokenauth.services._shared.errors import AlreadyExistsError
from tokenauth.services._shared.ports import CredentialStore, PasswordHasher
from tokenauth.services.identity.dto import UserPublicOut

log = logging.getLogger(__name__)

DEFAULT_MAX_REFRESH_TOKENS = 5


class InMemoryCredentialStore(CredentialStore):
    """
    Process-local user registry with bounded per-user refresh-token lists.

    :param hasher: Password hashing capability used on registration and login.
    :param max_refresh_tokens: Retention bound per user; the oldest token is
        evicted first when a new one would exceed it.

    .. note::
       One re-entrant lock guards every index and every token list. Password
       hashing runs outside the lock.
    """

    def __init__(
        self,
        *,
        hasher: PasswordHasher,
        max_refresh_tokens: int = DEFAULT_MAX_REFRESH_TOKENS,
    ) -> None:
        if max_refresh_tokens < 1:
            raise ValueError("max_refresh_tokens must be at least 1.")
        self._hasher = hasher
        self.max_refresh_tokens = max_refresh_tokens
        self._by_id: dict[int, User] = {}
        self._by_username: dict[str, User] = {}
        self._by_email: dict[str, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    # ------------------------- helpers -------------------------

    @staticmethod
    def _coerce_user_id(user_id: int | str) -> int | None:
        """Return an integer id, or ``None`` when the value cannot be one."""
        if isinstance(user_id, bool):
            return None
        if isinstance(user_id, int):
            return user_id
        if isinstance(user_id, str) and user_id.isascii() and user_id.isdecimal():
            return int(user_id)
        return None

    def _get(self, user_id: int | str) -> User | None:
        uid = self._coerce_user_id(user_id)
        return None if uid is None else self._by_id.get(uid)

    @staticmethod
    def _snapshot(user: User) -> User:
        # Callers get a detached copy so they cannot mutate the token list unlocked.
        return replace(user, refresh_tokens=list(user.refresh_tokens))

    def _ensure_available(self, username: str, email: str) -> None:
        if username in self._by_username:
            raise AlreadyExistsError("User", "username")
        if email in self._by_email:
            raise AlreadyExistsError("User", "email")

    # -------------------------- API ----------------------------

    def register(self, username: str, email: str, password: str) -> UserPublicOut:
        with self._lock:
            self._ensure_available(username, email)

        digest = self._hasher.hash(password)

        with self._lock:
            # Re-check: another thread may have claimed the name while hashing.
            self._ensure_available(username, email)
            user = User(
                id=next(self._ids),
                username=username,
                email=email,
                password_digest=digest,
            )
            self._by_id[user.id] = user
            self._by_username[username] = user
            self._by_email[email] = user

        log.info("credentials.user.registered", extra={"user_id": user.id})
        return user.to_public()

    def find_by_credential(self, username_or_email: str) -> User | None:
        with self._lock:
            user = self._by_username.get(username_or_email) or self._by_email.get(
                username_or_email
            )
            return self._snapshot(user) if user else None

    def find_by_id(self, user_id: int | str) -> User | None:
        with self._lock:
            user = self._get(user_id)
            return self._snapshot(user) if user else None

    def verify_password(self, plain: str, digest: str) -> bool:
        return self._hasher.verify(plain, digest)

    def add_refresh_token(self, user_id: int | str, token: str) -> None:
        with self._lock:
            user = self._get(user_id)
            if user is None:
                return
            while len(user.refresh_tokens) >= self.max_refresh_tokens:
                user.refresh_tokens.pop(0)
                log.info("credentials.refresh_token.evicted", extra={"user_id": user.id})
            user.refresh_tokens.append(token)

    def remove_refresh_token(self, user_id: int | str, token: str) -> None:
        with self._lock:
            user = self._get(user_id)
            if user is None:
                return
            user.refresh_tokens[:] = [t for t in user.refresh_tokens if t != token]

    def has_refresh_token(self, user_id: int | str, token: str) -> bool:
        with self._lock:
            user = self._get(user_id)
            return user is not None and token in user.refresh_tokens

    def list_all(self) -> list[UserPublicOut]:
        with self._lock:
            # dicts keep insertion order, which is registration order here
            return [u.to_public() for u in self._by_id.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)
