# tokenauth/services/_shared/base.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from tokenauth.services._shared.ports import CredentialStore


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (auth, request ids, etc.).

    :param actor_id: Authenticated user identifier.
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: int | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the shared :class:`CredentialStore` handle.
    * Provide a per-service logger that tags records with the request id.
    * Keep services thin, orchestration-only, no web leakage.

    Notes
    -----
    - Services never reach for a module-level store; it is always injected.
    - Failures are raised as :mod:`tokenauth.services._shared.errors`
      exceptions and translated to HTTP at the boundary only.
    """

    def __init__(self, *, store: CredentialStore, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param store: Credential store shared by the application.
        :type store: CredentialStore
        :param ctx: Optional request-scoped context (auth, tracing).
        :type ctx: ServiceContext | None
        """
        self.store = store
        self.ctx = ctx or ServiceContext()
        self.log = logging.getLogger(type(self).__module__)

    def _log_extra(self, **fields: object) -> dict[str, object]:
        """Merge context fields into a logging ``extra`` mapping."""
        extra: dict[str, object] = {}
        if self.ctx.request_id:
            extra["request_id"] = self.ctx.request_id
        if self.ctx.actor_id is not None:
            extra["actor_id"] = self.ctx.actor_id
        extra.update(fields)
        return extra
