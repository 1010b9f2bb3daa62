"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import (
    AccessTokenSchema,
    LoginResponseSchema,
    LoginSchema,
    LogoutSchema,
    RefreshTokenSchema,
    RegisterSchema,
)
from .user import UserSchema

__all__ = [
    "AccessTokenSchema",
    "LoginResponseSchema",
    "LoginSchema",
    "LogoutSchema",
    "RefreshTokenSchema",
    "RegisterSchema",
    "UserSchema",
]
