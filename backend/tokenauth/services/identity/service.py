"""
IdentityService
===============

Application service for the ``User`` aggregate:
- Registration (uniqueness enforced by the store)
- Public lookups (single user, full listing)

Token issuance lives in :mod:`tokenauth.services.auth`.
"""

from __future__ import annotations

from tokenauth.services._shared.base import BaseService
from tokenauth.services._shared.errors import NotFoundError, ValidationError
from tokenauth.services.identity.dto import UserPublicOut, UserRegisterIn


class IdentityService(BaseService):
    """
    Application service for the ``User`` aggregate.

    Responsibilities
    ----------------
    - Register users ensuring username and email uniqueness.
    - Retrieve public user views.
    """

    # --------------------------------------------------------------------- #
    # Registration
    # --------------------------------------------------------------------- #

    def register_user(self, dto: UserRegisterIn) -> UserPublicOut:
        """
        Register a new user.

        :param dto: User registration input DTO.
        :type dto: UserRegisterIn
        :returns: Public-safe user DTO.
        :rtype: UserPublicOut
        :raises ValidationError: When a field is empty.
        :raises AlreadyExistsError: When username or email is already taken.
        """
        if not (dto.username and dto.email and dto.password):
            raise ValidationError("username, email and password are required")
        return self.store.register(dto.username, dto.email, dto.password)

    # --------------------------------------------------------------------- #
    # Retrieval
    # --------------------------------------------------------------------- #

    def get_user(self, user_id: int) -> UserPublicOut:
        """
        Retrieve a user by identifier.

        :param user_id: User identifier.
        :type user_id: int
        :returns: Public-safe user DTO.
        :rtype: UserPublicOut
        :raises NotFoundError: If user does not exist.
        """
        self.log.debug("identity.user.lookup", extra=self._log_extra(user_id=user_id))
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user.to_public()

    def list_users(self) -> list[UserPublicOut]:
        """Return every registered user in registration order."""
        return self.store.list_all()
