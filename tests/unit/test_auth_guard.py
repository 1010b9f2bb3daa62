"""Unit tests for the request authentication guard."""

from __future__ import annotations

from datetime import timedelta

import pytest

from tokenauth.services import AuthGuard, RejectReason
from tokenauth.services.auth.guard import extract_bearer_token

from tests.helpers.auth import expired_token


@pytest.fixture()
def guard(store, codec) -> AuthGuard:
    return AuthGuard(store=store, codec=codec)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
        ("BEARER abc", "abc"),
        (None, None),
        ("", None),
        ("Bearer", None),
        ("Bearer ", None),
        ("Basic abc", None),
        ("Bearer abc def", None),
        ("abc", None),
    ],
)
def test_extract_bearer_token(header, expected) -> None:
    assert extract_bearer_token(header) == expected


def test_authenticates_valid_access_token(guard, codec, alice) -> None:
    outcome = guard.authenticate(f"Bearer {codec.sign_access(alice.id)}")

    assert outcome.authenticated
    assert outcome.identity == alice
    assert outcome.reason is None


@pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer"])
def test_missing_or_malformed_header(guard, header) -> None:
    outcome = guard.authenticate(header)

    assert not outcome.authenticated
    assert outcome.reason is RejectReason.NO_TOKEN


def test_expired_access_token(guard, codec, alice) -> None:
    outcome = guard.authenticate(f"Bearer {expired_token(codec, alice.id)}")

    assert outcome.reason is RejectReason.TOKEN_EXPIRED


def test_expiry_boundary(guard, codec, alice, freeze_time) -> None:
    with freeze_time() as frozen:
        header = f"Bearer {codec.sign_access(alice.id)}"
        frozen.tick(timedelta(minutes=15, seconds=1))

        assert guard.authenticate(header).reason is RejectReason.TOKEN_EXPIRED


def test_refresh_token_is_not_an_access_token(guard, codec, alice) -> None:
    outcome = guard.authenticate(f"Bearer {codec.sign_refresh(alice.id)}")

    assert outcome.reason is RejectReason.TOKEN_INVALID


def test_garbage_token(guard) -> None:
    assert guard.authenticate("Bearer not.a.jwt").reason is RejectReason.TOKEN_INVALID


def test_unknown_subject(guard, codec) -> None:
    outcome = guard.authenticate(f"Bearer {codec.sign_access(404)}")

    assert outcome.reason is RejectReason.USER_NOT_FOUND
    assert outcome.identity is None


def test_non_ascii_digit_subject_is_unknown_user(guard, codec) -> None:
    outcome = guard.authenticate(f"Bearer {codec.sign_access('²')}")

    assert outcome.reason is RejectReason.USER_NOT_FOUND
