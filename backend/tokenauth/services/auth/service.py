# tokenauth/services/auth/service.py
from __future__ import annotations

from tokenauth.services._shared.base import BaseService, ServiceContext
from tokenauth.services._shared.errors import (
    InvalidCredentialsError,
    TokenExpiredError,
    TokenInvalidError,
    TokenRevokedError,
)
from tokenauth.services._shared.ports import (
    CredentialStore,
    KeyKind,
    TokenCodec,
    VerifyStatus,
)
from tokenauth.services.auth.dto import (
    AccessTokenOut,
    LoginIn,
    LoginOut,
    LogoutIn,
    RefreshIn,
)


class AuthService(BaseService):
    """
    Session lifecycle service (login / refresh / logout).

    Issues token pairs through a :class:`TokenCodec` and keeps the set of
    live refresh tokens per user in the :class:`CredentialStore`. A refresh
    token is usable only while it is both cryptographically valid and still
    present in its subject's list.
    """

    def __init__(
        self,
        *,
        store: CredentialStore,
        codec: TokenCodec,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param store: Users and their refresh-token lists.
        :param codec: Adapter for signing/verifying tokens.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(store=store, ctx=ctx)
        self.codec = codec

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> LoginOut:
        """
        Authenticate credentials and issue a fresh token pair.

        :param dto: Login input.
        :returns: Access/refresh tokens plus the public user view.
        :raises InvalidCredentialsError: Unknown user or wrong password
            (deliberately indistinguishable).
        """
        user = self.store.find_by_credential(dto.username_or_email)
        if user is None or not self.store.verify_password(dto.password, user.password_digest):
            self.log.warning("auth.login.failed", extra=self._log_extra(event="login"))
            raise InvalidCredentialsError()

        access = self.codec.sign_access(user.id)
        refresh = self.codec.sign_refresh(user.id)
        # Retention bound and eviction are applied by the store.
        self.store.add_refresh_token(user.id, refresh)

        self.log.info("auth.login.succeeded", extra=self._log_extra(user_id=user.id))
        return LoginOut(access_token=access, refresh_token=refresh, user=user.to_public())

    # ------------------------------------------------------------------ #
    # Refresh (no rotation)
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> AccessTokenOut:
        """
        Exchange a live refresh token for a new access token.

        The refresh token itself is not rotated; it stays usable until it
        expires, is evicted, or is logged out.

        :param dto: Refresh input.
        :returns: A new access token.
        :raises TokenInvalidError: Bad signature, wrong key, or malformed.
        :raises TokenExpiredError: Valid signature, elapsed expiry.
        :raises TokenRevokedError: Valid and unexpired but no longer held by
            its subject (logged out, evicted, or unknown subject).
        """
        result = self.codec.verify(dto.refresh_token, KeyKind.REFRESH)

        if result.status is VerifyStatus.EXPIRED:
            self.log.info("auth.refresh.rejected", extra=self._log_extra(event="expired"))
            raise TokenExpiredError("Refresh token has expired. Please login again.")
        if result.status is VerifyStatus.INVALID or result.subject is None:
            self.log.info("auth.refresh.rejected", extra=self._log_extra(event="invalid"))
            raise TokenInvalidError("Invalid refresh token")

        if not self.store.has_refresh_token(result.subject, dto.refresh_token):
            self.log.info(
                "auth.refresh.rejected",
                extra=self._log_extra(event="revoked", user_id=result.subject),
            )
            raise TokenRevokedError("Refresh token has been revoked. Please login again.")

        return AccessTokenOut(access_token=self.codec.sign_access(result.subject))

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, dto: LogoutIn) -> None:
        """
        Revoke the provided refresh token.

        Idempotent: unknown, invalid, expired, or already removed tokens are
        accepted silently so the call never reveals token validity.
        """
        result = self.codec.verify(dto.refresh_token, KeyKind.REFRESH)
        if result.is_valid and result.subject is not None:
            self.store.remove_refresh_token(result.subject, dto.refresh_token)
            self.log.info("auth.logout", extra=self._log_extra(user_id=result.subject))
