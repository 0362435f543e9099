"""Unit tests for core.config module.

Tests cover:
- Settings defaults
- model_validator checks on redirect status and cache age
- docs_enabled / redirect_cache_control properties
- get_settings / clear_settings_cache lru_cache behavior
"""

import pytest
from pydantic import ValidationError

from core.config import Settings, clear_settings_cache, get_settings


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults(self, monkeypatch):
        for name in (
            "REDIRECT_STATUS_CODE",
            "PRESERVE_QUERY_STRING",
            "STRIP_TRAILING_SLASH",
            "REDIRECT_CACHE_MAX_AGE",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.redirect_status_code == 308
        assert settings.preserve_query_string is True
        assert settings.strip_trailing_slash is True
        assert settings.redirect_cache_max_age == 3600

    def test_settings_are_frozen(self):
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.redirect_status_code = 301  # type: ignore[misc]


@pytest.mark.unit
class TestSettingsValidation:
    @pytest.mark.parametrize("code", [301, 302, 307, 308])
    def test_accepts_redirect_codes(self, code):
        assert Settings(_env_file=None, redirect_status_code=code).redirect_status_code == code

    @pytest.mark.parametrize("code", [200, 303, 404])
    def test_rejects_other_codes(self, code):
        with pytest.raises(ValidationError, match="REDIRECT_STATUS_CODE"):
            Settings(_env_file=None, redirect_status_code=code)

    def test_rejects_negative_cache_age(self):
        with pytest.raises(ValidationError, match="REDIRECT_CACHE_MAX_AGE"):
            Settings(_env_file=None, redirect_cache_max_age=-1)


@pytest.mark.unit
class TestComputedProperties:
    def test_cache_control_header(self):
        settings = Settings(_env_file=None, redirect_cache_max_age=600)
        assert settings.redirect_cache_control == "public, max-age=600"

    def test_cache_control_disabled(self):
        settings = Settings(_env_file=None, redirect_cache_max_age=0)
        assert settings.redirect_cache_control is None

    def test_docs_enabled_by_debug(self):
        assert Settings(_env_file=None, debug=True, enable_docs=False).docs_enabled

    def test_docs_enabled_by_flag(self):
        assert Settings(_env_file=None, debug=False, enable_docs=True).docs_enabled

    def test_docs_disabled_by_default(self):
        assert not Settings(_env_file=None, debug=False, enable_docs=False).docs_enabled


@pytest.mark.unit
class TestGetSettings:
    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_clear_picks_up_env(self, monkeypatch):
        monkeypatch.setenv("REDIRECT_STATUS_CODE", "301")
        clear_settings_cache()
        assert get_settings().redirect_status_code == 301

        monkeypatch.setenv("REDIRECT_STATUS_CODE", "302")
        assert get_settings().redirect_status_code == 301
        clear_settings_cache()
        assert get_settings().redirect_status_code == 302
