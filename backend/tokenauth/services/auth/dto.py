# tokenauth/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

from tokenauth.services.identity.dto import UserPublicOut

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param username_or_email: Username or email, matched exactly.
    :type username_or_email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    username_or_email: str
    password: str


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    refresh_token: str


@dataclass(frozen=True, slots=True)
class LogoutIn:
    """
    Input DTO for logout.

    :param refresh_token: Encoded refresh JWT to revoke.
    :type refresh_token: str
    """

    refresh_token: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Output DTO for a successful login.

    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT, registered with the store.
    :type refresh_token: str
    :param user: Public view of the authenticated user.
    :type user: UserPublicOut
    """

    access_token: str
    refresh_token: str
    user: UserPublicOut


@dataclass(frozen=True, slots=True)
class AccessTokenOut:
    """
    Output DTO for a refresh: a new access token only.

    :param access_token: Encoded access JWT.
    :type access_token: str
    """

    access_token: str
