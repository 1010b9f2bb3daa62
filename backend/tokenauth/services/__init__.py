"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`tokenauth.services` without knowing internal
structure.

Re-exports
----------
- Base primitives (from ``tokenauth.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Identity service (from ``tokenauth.services.identity``)
    * :class:`IdentityService`
    * DTOs: :class:`UserRegisterIn`, :class:`UserPublicOut`

- Session lifecycle (from ``tokenauth.services.auth``)
    * :class:`AuthService`, :class:`AuthGuard`
    * DTOs: :class:`LoginIn`, :class:`LoginOut`, :class:`RefreshIn`,
      :class:`AccessTokenOut`, :class:`LogoutIn`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from .auth.dto import AccessTokenOut, LoginIn, LoginOut, LogoutIn, RefreshIn
from .auth.guard import AuthGuard, GuardOutcome, RejectReason
from .auth.service import AuthService
from .identity.dto import UserPublicOut, UserRegisterIn
from .identity.service import IdentityService

__all__ = [
    "AccessTokenOut",
    "AuthGuard",
    "AuthService",
    "BaseService",
    "GuardOutcome",
    "IdentityService",
    "LoginIn",
    "LoginOut",
    "LogoutIn",
    "RefreshIn",
    "RejectReason",
    "ServiceContext",
    "UserPublicOut",
    "UserRegisterIn",
]
