"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from tokenauth.core.errors import Unauthorized
from tokenauth.core.extensions import get_components
from tokenauth.core.logger import ensure_request_id
from tokenauth.services import AuthService, IdentityService, ServiceContext, UserPublicOut

F = TypeVar("F", bound=Callable[..., Any])


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    identity: UserPublicOut | None = g.get("current_user")
    return ServiceContext(
        actor_id=identity.id if identity else None,
        request_id=ensure_request_id(),
    )


def auth_service() -> AuthService:
    """Return an :class:`AuthService` bound to this app's store and codec."""

    components = get_components()
    return AuthService(store=components.store, codec=components.codec, ctx=service_context())


def identity_service() -> IdentityService:
    """Return an :class:`IdentityService` bound to this app's store."""

    return IdentityService(store=get_components().store, ctx=service_context())


def require_auth(func: F) -> F:
    """Run the auth guard; expose the identity as ``g.current_user`` or reject with 401."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        outcome = get_components().guard.authenticate(request.headers.get("Authorization"))
        if outcome.reason is not None:
            raise Unauthorized(outcome.reason)
        g.current_user = outcome.identity
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_user() -> UserPublicOut:
    """Return the identity resolved by :func:`require_auth`."""

    identity: UserPublicOut | None = g.get("current_user")
    if identity is None:
        raise RuntimeError("current_user() called outside a @require_auth view.")
    return identity


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
