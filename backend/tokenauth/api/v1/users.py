"""User directory endpoints (read-only, authenticated)."""

from __future__ import annotations

from flask import Blueprint

from tokenauth.api.deps import current_user, identity_service, json_response, require_auth, timing
from tokenauth.schemas import UserSchema

bp = Blueprint("users", __name__, url_prefix="/users")

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)


@bp.get("")
@require_auth
@timing
def list_users():
    """Return every registered user in registration order."""

    users = identity_service().list_users()
    return json_response({"data": user_list_schema.dump(users)})


@bp.get("/profile")
@require_auth
@timing
def profile():
    """Return the caller's own profile."""

    return json_response({"data": user_schema.dump(current_user())})


@bp.get("/<int:user_id>")
@require_auth
@timing
def get_user(user_id: int):
    """Return a single user or 404."""

    user = identity_service().get_user(user_id)
    return json_response({"data": user_schema.dump(user)})
