from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from tokenauth.services._shared.ports import PasswordHasher

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Password hashing backed by :mod:`werkzeug.security`.

    :param method: Hash method understood by ``generate_password_hash``
        (e.g. ``"scrypt"`` or ``"pbkdf2:sha256:600000"``).
    """

    method: str = "scrypt"

    def hash(self, plaintext: str) -> str:
        """
        Hash a raw password.

        :raises ValueError: If ``plaintext`` is empty or not a string.
        """
        if not isinstance(plaintext, str) or not plaintext:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(plaintext, method=self.method)

    def verify(self, plaintext: str, digest: str) -> bool:
        """Return ``True`` on match; mismatches and unreadable digests give ``False``."""
        if not digest or not isinstance(plaintext, str):
            return False
        try:
            # ``check_password_hash`` is untyped; coerce to bool for mypy.
            return bool(check_password_hash(digest, plaintext))
        except ValueError:
            # Unknown method/format in the stored digest.
            log.warning("password.digest.unreadable")
            return False
