"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from tokenauth.services import LoginIn, LogoutIn, RefreshIn, UserRegisterIn

from .user import UserSchema


class _InputSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class RegisterSchema(_InputSchema):
    """Input payload for account registration."""

    username = fields.String(required=True, validate=validate.Length(min=3, max=30))
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=6, max=128))

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> UserRegisterIn:
        return UserRegisterIn(**data)


class LoginSchema(_InputSchema):
    """Input payload for authenticating with a username or an email."""

    username_or_email = fields.String(
        required=True,
        data_key="usernameOrEmail",
        validate=validate.Length(min=1, max=254),
    )
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> LoginIn:
        return LoginIn(**data)


class RefreshTokenSchema(_InputSchema):
    """Input payload carrying a refresh token to exchange."""

    refresh_token = fields.String(
        required=True,
        data_key="refreshToken",
        validate=validate.Length(min=1),
    )

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> RefreshIn:
        return RefreshIn(**data)


class LogoutSchema(RefreshTokenSchema):
    """Input payload carrying the refresh token to revoke."""

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> LogoutIn:
        return LogoutIn(**data)


class LoginResponseSchema(Schema):
    """Response payload for a successful login."""

    access_token = fields.String(required=True, data_key="accessToken")
    refresh_token = fields.String(required=True, data_key="refreshToken")
    user = fields.Nested(UserSchema, required=True)


class AccessTokenSchema(Schema):
    """Response payload containing a freshly issued access token."""

    access_token = fields.String(required=True, data_key="accessToken")
