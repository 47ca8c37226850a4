import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings, settings


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgresql://user:pass@db/recipes", "postgresql+asyncpg://user:pass@db/recipes"),
        ("sqlite:///./recipes.db", "sqlite+aiosqlite:///./recipes.db"),
        ("sqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
        ("postgresql+asyncpg://db/recipes", "postgresql+asyncpg://db/recipes"),
    ],
)
def test_database_url_async(url, expected):
    assert Settings(DATABASE_URL=url).database_url_async == expected


def test_cors_origins_accepts_comma_separated_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")

    assert Settings().CORS_ORIGINS == ["http://a.example", "http://b.example"]


def test_search_push_down_from_env(monkeypatch):
    monkeypatch.setenv("SEARCH_PUSH_DOWN_INGREDIENTS", "true")

    assert Settings().SEARCH_PUSH_DOWN_INGREDIENTS is True


def test_invalid_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_FORMAT="xml")


def test_get_settings_returns_shared_instance():
    assert get_settings() is settings
    assert settings.ENVIRONMENT == "test"
    assert settings.is_sqlite
