"""
PhotoStudio Backend — Configuration Tests
===========================================

What:  Settings loading: required DATABASE_URL, URL normalization, integration
       detection, log level validation.
"""

import pytest
from pydantic import ValidationError

from photostudio.config import Settings


class TestDatabaseUrl:

    def test_missing_database_url_is_fatal(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_empty_database_url_is_fatal(self):
        with pytest.raises(ValidationError, match="DATABASE_URL"):
            Settings(database_url="   ")

    @pytest.mark.parametrize("url", [
        "postgres://u:p@db:5432/studio",
        "postgresql://u:p@db:5432/studio",
    ])
    def test_postgres_urls_use_asyncpg(self, url):
        settings = Settings(database_url=url)
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/studio"
        assert settings.is_sqlite is False

    def test_async_url_unchanged(self):
        url = "postgresql+asyncpg://u:p@db/studio"
        assert Settings(database_url=url).database_url == url


class TestIntegrations:

    def test_unconfigured_integrations_listed(self, settings_factory):
        settings = settings_factory()
        assert settings.image_host_configured is False
        assert settings.email_configured is False
        assert len(settings.missing_integrations()) == 2

    def test_configured_integrations(self, settings_factory):
        settings = settings_factory(
            cloudinary_cloud_name="demo",
            cloudinary_api_key="k",
            cloudinary_api_secret="s",
            smtp_host="smtp.example.com",
            email_user="u",
            email_pass="p",
        )
        assert settings.missing_integrations() == []


class TestMisc:

    def test_log_level_normalized(self, settings_factory):
        assert settings_factory(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self, settings_factory):
        with pytest.raises(ValidationError):
            settings_factory(log_level="LOUD")

    def test_cors_origins_list(self, settings_factory):
        settings = settings_factory(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
