"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from datetime import timedelta
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Load .env in development (no-op when the file is missing)
load_dotenv()

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS: Final[Mapping[str, str]] = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_duration(raw: str | int | timedelta) -> timedelta:
    """Convert a compact duration such as ``"15m"`` or ``"7d"`` to a timedelta.

    Parameters
    ----------
    raw: str | int | datetime.timedelta
        Either a ready ``timedelta``, a number of seconds, or a string made of
        an integer followed by an optional unit (``s``, ``m``, ``h``, ``d``).

    Returns
    -------
    datetime.timedelta
        Parsed duration.

    Raises
    ------
    ValueError
        If the string does not follow the ``<int>[smhd]`` format.
    """
    if isinstance(raw, timedelta):
        return raw
    if isinstance(raw, int):
        return timedelta(seconds=raw)
    match = _DURATION_RE.match(str(raw))
    if match is None:
        raise ValueError(f"Invalid duration {raw!r}; expected e.g. '900', '15m', '7d'.")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret. Not used for tokens.
    ACCESS_TOKEN_SECRET: str
        HMAC key for access tokens.
    REFRESH_TOKEN_SECRET: str
        HMAC key for refresh tokens. Must differ from the access key so that a
        leak of one cannot mint the other.
    ACCESS_TOKEN_EXPIRES: datetime.timedelta
        Access token lifetime (``ACCESS_TOKEN_EXPIRES_IN``, default ``15m``).
    REFRESH_TOKEN_EXPIRES: datetime.timedelta
        Refresh token lifetime (``REFRESH_TOKEN_EXPIRES_IN``, default ``7d``).
    JWT_ALGORITHM: str
        The single signing algorithm accepted on verification.
    MAX_REFRESH_TOKENS_PER_USER: int
        Bound on retained refresh tokens per user (oldest evicted first).
    PASSWORD_HASH_METHOD: str
        Method passed to :func:`werkzeug.security.generate_password_hash`.
    AUTH_LOGIN_RATE_LIMIT: str
        Flask-Limiter rule applied to the login endpoint.
    RATELIMIT_ENABLED: bool
        Global Flask-Limiter switch.
    RATELIMIT_STORAGE_URI: str
        Flask-Limiter storage backend (process memory by default).
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.
    APP_VERSION: str
        Version string reported by the health endpoint.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET", "CHANGE_ME_ACCESS")
    REFRESH_TOKEN_SECRET = os.getenv("REFRESH_TOKEN_SECRET", "CHANGE_ME_REFRESH")
    ACCESS_TOKEN_EXPIRES = parse_duration(os.getenv("ACCESS_TOKEN_EXPIRES_IN", "15m"))
    REFRESH_TOKEN_EXPIRES = parse_duration(os.getenv("REFRESH_TOKEN_EXPIRES_IN", "7d"))
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    MAX_REFRESH_TOKENS_PER_USER = int(os.getenv("MAX_REFRESH_TOKENS_PER_USER", "5"))
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # Rate limiting
    AUTH_LOGIN_RATE_LIMIT = os.getenv("AUTH_LOGIN_RATE_LIMIT", "10 per minute")
    RATELIMIT_ENABLED = env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    APP_VERSION = os.getenv("APP_VERSION", "dev")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses fixed, distinct token secrets and a cheap password hash.
    - Disables rate limiting so tests can log in repeatedly.
    """

    TESTING = True
    DEBUG = False
    ACCESS_TOKEN_SECRET = "test-access-secret-0123456789abcdef0123456789"
    REFRESH_TOKEN_SECRET = "test-refresh-secret-0123456789abcdef012345678"
    ACCESS_TOKEN_EXPIRES = timedelta(minutes=15)
    REFRESH_TOKEN_EXPIRES = timedelta(days=7)
    MAX_REFRESH_TOKENS_PER_USER = 5
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    RATELIMIT_ENABLED = False
    PROPAGATE_EXCEPTIONS = False
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug disabled while relying on WSGI-level log configuration for
    noise control. Token secrets must come from the environment.
    """

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
