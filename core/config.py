"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the card engine server happen here. No
module should call os.getenv() or os.environ.get() directly -- import
get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. This is
      the official FastAPI dependency injection pattern for config.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. login_email -> LOGIN_EMAIL). Type coercion and validation are built in.

Credentials:
  LOGIN_EMAIL / LOGIN_PASSWORD hold the single valid identity. They are read
  once at process start and never change at runtime. If either is missing the
  server still starts, but no login can succeed -- the validator treats an
  empty configured value as "not configured", never as a match for an empty
  submission.

Layer rule: core/ is the kernel. This module may not import from api/ or auth/.
"""

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("cardengine.config")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    host: str = "0.0.0.0"  # nosec B104 -- server binds all interfaces like the node original
    port: int = 3001

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    # Empty string is the sentinel for "not configured".
    login_email: str = Field(default="", repr=False)
    login_password: str = Field(default="", repr=False)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    login_rate_limit: str = "10/minute"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    @property
    def login_credentials_configured(self) -> bool:
        return bool(self.login_email) and bool(self.login_password)

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @model_validator(mode="after")
    def warn_missing_credentials(self) -> "Settings":
        """Log loudly when the login identity is incomplete.

        A missing credential is not a startup failure: the rest of the
        server (health, static content) stays usable, and every login
        attempt is rejected with 401 until both values are set.
        """
        if not self.login_credentials_configured:
            logger.warning(
                "LOGIN_EMAIL and/or LOGIN_PASSWORD not set. " "Every login attempt will be rejected."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    return Settings()
