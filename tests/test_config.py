"""Settings — verifies defaults and database URL normalisation."""

import pytest

from perqara_api.config import Settings


@pytest.mark.parametrize("url,expected", [
    ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
    ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
    ("mysql://root:@127.0.0.1:3306/perqara", "mysql+aiomysql://root:@127.0.0.1:3306/perqara"),
    ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
    ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
])
def test_database_url_converted_to_async_driver(url, expected):
    assert Settings(database_url=url).database_url == expected


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.auto_create_tables is True
    assert settings.not_found_as_404 is False
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("NOT_FOUND_AS_404", "true")
    monkeypatch.setenv("PORT", "9000")
    settings = Settings(_env_file=None)
    assert settings.not_found_as_404 is True
    assert settings.port == 9000
