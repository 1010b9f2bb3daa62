from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """
    Opaque password hashing capability.

    Both calls may be slow (CPU-bound); callers must not hold shared locks
    while invoking them.
    """

    def hash(self, plaintext: str) -> str: ...

    def verify(self, plaintext: str, digest: str) -> bool: ...
