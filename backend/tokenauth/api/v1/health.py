"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from tokenauth.api.deps import json_response, timing
from tokenauth.core.extensions import get_components

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return liveness plus the size of the credential store."""

    version = current_app.config.get("APP_VERSION", "dev")
    payload = {"status": "ok", "users": get_components().store.count(), "version": version}
    return json_response(payload)
