"""
DTOs for IdentityService.

Data Transfer Objects (DTOs) isolate the service layer from the stored
``User`` records, ensuring clear input/output contracts and that the password
digest and refresh-token list never leave the store.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRegisterIn:
    """
    Input DTO for user registration.

    :param username: Public username (unique).
    :type username: str
    :param email: Login email (unique).
    :type email: str
    :param password: Raw password to be hashed by the store.
    :type password: str
    """

    username: str
    email: str
    password: str


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Output DTO representing public-safe user data.

    :param id: User identifier.
    :type id: int
    :param username: Username.
    :type username: str
    :param email: Email address.
    :type email: str
    """

    id: int
    username: str
    email: str
