"""Configuration: tests for environment-driven settings."""

from storefront.config import Settings, get_settings


def test_defaults_point_at_local_sqlite(monkeypatch):
    monkeypatch.delenv("STORAGE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_url == "sqlite:///storefront.db"
    assert settings.seed_catalog is True
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ADMIN_PASSCODE", "s3cret")
    monkeypatch.setenv("SEED_CATALOG", "false")
    settings = Settings(_env_file=None)
    assert settings.admin_passcode == "s3cret"
    assert settings.seed_catalog is False


def test_async_sqlite_driver_is_stripped():
    settings = Settings(_env_file=None, storage_url="sqlite+aiosqlite:///x.db")
    assert settings.storage_url == "sqlite:///x.db"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
