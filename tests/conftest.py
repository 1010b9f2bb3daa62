"""Global pytest fixtures for the tokenauth API."""

from __future__ import annotations

from collections.abc import Generator
from datetime import timedelta
from typing import Any, Callable

import pytest
from flask import Flask

from tokenauth import create_app
from tokenauth.core.config import TestingConfig
from tokenauth.core.extensions import EXTENSION_KEY, AuthComponents
from tokenauth.infra.jwt.pyjwt_token_codec import PyJWTTokenCodec, SigningKey
from tokenauth.infra.memory.credential_store import InMemoryCredentialStore
from tokenauth.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from tokenauth.services import AuthService, IdentityService, UserPublicOut

from tests.factories.user import register_user
from tests.helpers.auth import bearer, expired_token, issue_token

PASSWORD = "secret123"


# ---------------------------- Unit-level doubles ---------------------------- #


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    """Cheap password hasher for fast tests."""

    return WerkzeugPasswordHasher(method=TestingConfig.PASSWORD_HASH_METHOD)


@pytest.fixture()
def store(hasher: WerkzeugPasswordHasher) -> InMemoryCredentialStore:
    """Fresh credential store retaining five refresh tokens per user."""

    return InMemoryCredentialStore(hasher=hasher, max_refresh_tokens=5)


@pytest.fixture()
def codec() -> PyJWTTokenCodec:
    """Codec with distinct access/refresh keys (15 minutes / 7 days)."""

    return PyJWTTokenCodec(
        access=SigningKey(
            secret=TestingConfig.ACCESS_TOKEN_SECRET, expires=timedelta(minutes=15)
        ),
        refresh=SigningKey(secret=TestingConfig.REFRESH_TOKEN_SECRET, expires=timedelta(days=7)),
    )


@pytest.fixture()
def auth_service(store: InMemoryCredentialStore, codec: PyJWTTokenCodec) -> AuthService:
    """Session manager wired to the unit-level store and codec."""

    return AuthService(store=store, codec=codec)


@pytest.fixture()
def identity_service(store: InMemoryCredentialStore) -> IdentityService:
    """Identity directory wired to the unit-level store."""

    return IdentityService(store=store)


@pytest.fixture()
def alice(store: InMemoryCredentialStore) -> UserPublicOut:
    """A registered user in the unit-level store."""

    return register_user(store, username="alice", email="alice@example.com", password=PASSWORD)


# ------------------------------ Application -------------------------------- #


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application for tests.

    A fresh application (and thus a fresh credential store) is built for
    every test so registered users never leak between cases.
    """

    application = create_app(TestingConfig)
    yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def components(app: Flask) -> AuthComponents:
    """Store, codec and guard owned by ``app``."""

    return app.extensions[EXTENSION_KEY]


@pytest.fixture()
def user(components: AuthComponents) -> UserPublicOut:
    """Register and return a user in the application's store."""

    return register_user(components.store, password=PASSWORD)


@pytest.fixture()
def auth_token(components: AuthComponents, user: UserPublicOut) -> str:
    """Generate a valid access token for ``user``."""

    return issue_token(components.codec, user.id)


@pytest.fixture()
def auth_header(auth_token: str) -> dict[str, str]:
    """Authorization header for authenticated requests."""

    return bearer(auth_token)


@pytest.fixture()
def expired_auth_token(components: AuthComponents, user: UserPublicOut) -> str:
    """Return an already expired access token for ``user``."""

    return expired_token(components.codec, user.id)


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01") as frozen:
    ...         frozen.tick(60)
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01 12:00:00")

    return _factory
