"""Unit tests for application settings."""

import pytest
from pydantic import SecretStr, ValidationError

from pizzeria_config import Settings, get_settings


def _settings(**overrides) -> Settings:
    values = {
        "company_email_domain": "work.com",
        "postgres_password": SecretStr("secret"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettings:
    def test_defaults(self):
        settings = _settings()

        assert settings.session_cookie_name == "PIZZERIA_SESSION"
        assert settings.session_max_age_minutes == 30
        assert settings.session_max_age_seconds == 1800
        assert settings.password_hash_rounds == 12
        assert settings.api_cookie_secure is True
        assert settings.api_cookie_samesite == "lax"
        assert settings.cors_origins == []

    def test_postgres_url_from_components(self):
        settings = _settings(postgres_host="db", postgres_db="shop")

        assert settings.database_url == (
            "postgresql+asyncpg://postgres:secret@db:5432/shop"
        )

    def test_override_url_wins(self):
        settings = _settings(database_url_override="sqlite+aiosqlite:///./x.db")

        assert settings.database_url == "sqlite+aiosqlite:///./x.db"

    def test_cors_origins_are_split(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_company_domain_is_stripped(self):
        assert _settings(company_email_domain=" work.com ").company_email_domain == (
            "work.com"
        )

    def test_blank_company_domain_is_rejected(self):
        with pytest.raises(ValidationError, match="company_email_domain"):
            _settings(company_email_domain="   ")

    def test_company_domain_is_required(self, monkeypatch):
        monkeypatch.delenv("COMPANY_EMAIL_DOMAIN", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None, postgres_password=SecretStr("secret"))


class TestGetSettings:
    def test_reads_environment_and_caches(self, monkeypatch):
        monkeypatch.setenv("COMPANY_EMAIL_DOMAIN", "pizza.example")
        monkeypatch.setenv("POSTGRES_PASSWORD", "secret")

        first = get_settings()

        assert first.company_email_domain == "pizza.example"
        assert get_settings() is first
