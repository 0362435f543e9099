"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

REDIRECT_STATUS_CODES = frozenset({301, 302, 307, 308})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Status used for legacy URL redirects. 308 keeps the method and is cached
    # by browsers like 301.
    redirect_status_code: int = 308

    # Carry ?utm=... and friends over to the redirect target
    preserve_query_string: bool = True

    # /quickstart/ is looked up as /quickstart (the table has no trailing slashes)
    strip_trailing_slash: bool = True

    # Cache-Control max-age on redirect responses; 0 disables the header
    redirect_cache_max_age: int = 3600

    # Feature flags, production defaults
    # Set DEBUG=true in .env for local development
    debug: bool = False
    enable_docs: bool = False  # Swagger UI at /docs

    @model_validator(mode="after")
    def validate_config(self) -> Self:
        if self.redirect_status_code not in REDIRECT_STATUS_CODES:
            raise ValueError(
                f"REDIRECT_STATUS_CODE must be one of "
                f"{sorted(REDIRECT_STATUS_CODES)}, got {self.redirect_status_code}."
            )
        if self.redirect_cache_max_age < 0:
            raise ValueError("REDIRECT_CACHE_MAX_AGE must be >= 0.")
        return self

    @property
    def docs_enabled(self) -> bool:
        return self.enable_docs or self.debug

    @property
    def redirect_cache_control(self) -> str | None:
        """Cache-Control header value for redirects, or None to omit it."""
        if not self.redirect_cache_max_age:
            return None
        return f"public, max-age={self.redirect_cache_max_age}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this in tests to reset settings between test cases.
    After clearing, the next get_settings() call will create
    a fresh Settings instance with current environment variables.

    Example:
        def test_something(monkeypatch):
            monkeypatch.setenv("REDIRECT_STATUS_CODE", "301")
            clear_settings_cache()
            settings = get_settings()  # Fresh instance
    """
    get_settings.cache_clear()
