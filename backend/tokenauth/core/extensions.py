"""Flask extension instances and the per-app authentication components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from flask import Flask, current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from tokenauth.infra.jwt.pyjwt_token_codec import PyJWTTokenCodec
from tokenauth.infra.memory.credential_store import InMemoryCredentialStore
from tokenauth.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from tokenauth.services._shared.ports import CredentialStore, TokenCodec
from tokenauth.services.auth.guard import AuthGuard

log = logging.getLogger(__name__)

EXTENSION_KEY = "tokenauth"

# Import-safe singleton; storage and switches come from app config
# (RATELIMIT_STORAGE_URI, RATELIMIT_ENABLED).
limiter = Limiter(key_func=get_remote_address)


@dataclass(frozen=True, slots=True)
class AuthComponents:
    """
    Objects shared by every request handler of one application.

    :ivar store: The single credential registry of the process.
    :ivar codec: Token signer/verifier.
    :ivar guard: Request gate built on ``store`` and ``codec``.
    """

    store: CredentialStore
    codec: TokenCodec
    guard: AuthGuard


def build_components(config) -> AuthComponents:
    """Construct store, codec, and guard from a Flask config mapping."""
    store = InMemoryCredentialStore(
        hasher=WerkzeugPasswordHasher(method=config["PASSWORD_HASH_METHOD"]),
        max_refresh_tokens=int(config["MAX_REFRESH_TOKENS_PER_USER"]),
    )
    codec = PyJWTTokenCodec.from_config(config)
    return AuthComponents(store=store, codec=codec, guard=AuthGuard(store=store, codec=codec))


def _check_token_settings(app: Flask) -> None:
    cfg = app.config
    if cfg["ACCESS_TOKEN_SECRET"] == cfg["REFRESH_TOKEN_SECRET"]:
        log.warning("config.token_secrets.identical")
    if cfg["ACCESS_TOKEN_EXPIRES"] >= cfg["REFRESH_TOKEN_EXPIRES"]:
        log.warning("config.token_lifetimes.access_not_shorter")


def init_app(app: Flask) -> None:
    """Initialize the rate limiter and attach the authentication components.

    Parameters
    ----------
    app: flask.Flask
        Application receiving a fresh store/codec/guard under
        ``app.extensions["tokenauth"]``. Each application owns its own store.
    """
    limiter.init_app(app)
    _check_token_settings(app)
    app.extensions[EXTENSION_KEY] = build_components(app.config)


def get_components() -> AuthComponents:
    """Return the components of the current application."""
    components = current_app.extensions.get(EXTENSION_KEY)
    if components is None:
        raise RuntimeError("Auth components are not initialized. Call init_app() first.")
    return components
