"""Unit tests for the werkzeug-backed password hasher."""

from __future__ import annotations

import pytest

from tokenauth.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher


def test_hash_and_verify(hasher) -> None:
    digest = hasher.hash("secret123")

    assert digest != "secret123"
    assert digest.startswith("pbkdf2:sha256")
    assert hasher.verify("secret123", digest)
    assert not hasher.verify("secret124", digest)


def test_hashes_are_salted(hasher) -> None:
    assert hasher.hash("secret123") != hasher.hash("secret123")


def test_empty_password_is_refused(hasher) -> None:
    with pytest.raises(ValueError):
        hasher.hash("")


@pytest.mark.parametrize("digest", ["", "plain", "unknown$salt$hash"])
def test_unreadable_digest_verifies_false(hasher, digest) -> None:
    assert hasher.verify("secret123", digest) is False


def test_default_method_is_scrypt() -> None:
    assert WerkzeugPasswordHasher().method == "scrypt"
