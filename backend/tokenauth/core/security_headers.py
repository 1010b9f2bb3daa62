"""Baseline security headers applied to every response."""

from __future__ import annotations

from collections.abc import Mapping

from flask import Flask, Response

SECURITY_HEADERS: Mapping[str, str] = {
    "X-XSS-Protection": "1; mode=block",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
    "Content-Security-Policy": (
        "default-src 'self'; script-src 'self'; style-src 'self'; "
        "img-src 'self'; font-src 'self'"
    ),
}


def init_app(app: Flask) -> None:
    """Register an ``after_request`` hook adding :data:`SECURITY_HEADERS`.

    Headers already set by a view are left untouched.
    """

    @app.after_request
    def _apply_security_headers(response: Response) -> Response:
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
