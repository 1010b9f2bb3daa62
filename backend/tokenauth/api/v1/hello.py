"""Unauthenticated greeting endpoint."""

from __future__ import annotations

from flask import Blueprint

from tokenauth.api.deps import json_response

bp = Blueprint("hello", __name__)


@bp.get("/hello")
def hello():
    return json_response({"message": "Hello, world!"})
