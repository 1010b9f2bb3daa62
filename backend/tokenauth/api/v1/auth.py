"""Authentication endpoints: registration and the token lifecycle."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from tokenauth.api.deps import (
    auth_service,
    current_user,
    identity_service,
    json_response,
    require_auth,
    timing,
)
from tokenauth.core.extensions import limiter
from tokenauth.schemas import (
    AccessTokenSchema,
    LoginResponseSchema,
    LoginSchema,
    LogoutSchema,
    RefreshTokenSchema,
    RegisterSchema,
    UserSchema,
)

bp = Blueprint("auth", __name__, url_prefix="/auth")

register_schema = RegisterSchema()
login_schema = LoginSchema()
refresh_schema = RefreshTokenSchema()
logout_schema = LogoutSchema()
user_schema = UserSchema()
login_response_schema = LoginResponseSchema()
access_token_schema = AccessTokenSchema()


def _login_rate_limit() -> str:
    return str(current_app.config.get("AUTH_LOGIN_RATE_LIMIT", "10 per minute"))


@bp.post("/register")
@timing
def register():
    """Register a new user and return its public representation."""

    dto = register_schema.load(request.get_json(silent=True) or {})
    user = identity_service().register_user(dto)
    body = {
        "status": "success",
        "message": "User registered successfully",
        "data": {"user": user_schema.dump(user)},
    }
    return json_response(body, status=201)


@bp.post("/login")
@limiter.limit(_login_rate_limit)
@timing
def login():
    """Authenticate credentials and issue an access/refresh token pair."""

    dto = login_schema.load(request.get_json(silent=True) or {})
    result = auth_service().login(dto)
    body = {
        "status": "success",
        "message": "Login successful",
        "data": login_response_schema.dump(result),
    }
    return json_response(body)


@bp.post("/refresh-token")
@timing
def refresh_token():
    """Exchange a live refresh token for a new access token."""

    dto = refresh_schema.load(request.get_json(silent=True) or {})
    result = auth_service().refresh(dto)
    return json_response({"status": "success", "data": access_token_schema.dump(result)})


@bp.post("/logout")
@timing
def logout():
    """Revoke a refresh token; succeeds whatever the token's state."""

    dto = logout_schema.load(request.get_json(silent=True) or {})
    auth_service().logout(dto)
    return json_response({"status": "success", "message": "Logout successful"})


@bp.get("/me")
@require_auth
@timing
def me():
    """Return the identity resolved from the bearer token."""

    return json_response({"data": {"user": user_schema.dump(current_user())}})
