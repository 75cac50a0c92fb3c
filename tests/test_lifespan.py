"""App Lifespan — startup builds the store handle and creates the users table.

Invariants:
    - Startup stores the DatabaseSessionManager on app.state
    - users table exists after startup when AUTO_CREATE_TABLES is on (default)
    - AUTO_CREATE_TABLES=false leaves the schema untouched
    - Shutdown disposes the engine
"""

import logging

import pytest
from sqlalchemy import inspect

from perqara_api.config import get_settings
from perqara_api.infrastructure.database import DatabaseSessionManager
from perqara_api.main import app


@pytest.fixture
def database_file(tmp_path, monkeypatch):
    """Point settings at a temporary SQLite file for one app start."""
    path = tmp_path / "startup.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    get_settings.cache_clear()
    handlers = list(logging.root.handlers)
    level = logging.root.level

    yield path

    get_settings.cache_clear()
    logging.root.setLevel(level)
    for h in logging.root.handlers[:]:
        if h not in handlers:
            logging.root.removeHandler(h)
    if hasattr(app.state, "db_manager"):
        del app.state.db_manager


async def _table_names(manager: DatabaseSessionManager) -> list[str]:
    async with manager.engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).get_table_names(),
        )


async def test_startup_creates_users_table(database_file):
    async with app.router.lifespan_context(app):
        manager = app.state.db_manager
        assert isinstance(manager, DatabaseSessionManager)
        assert "users" in await _table_names(manager)
        assert await manager.health_check() is True

    assert database_file.exists()


async def test_startup_skips_schema_when_disabled(database_file, monkeypatch):
    monkeypatch.setenv("AUTO_CREATE_TABLES", "false")

    async with app.router.lifespan_context(app):
        assert "users" not in await _table_names(app.state.db_manager)


async def test_shutdown_disposes_engine(database_file, monkeypatch):
    disposed = []
    original_close = DatabaseSessionManager.close

    async def recording_close(self):
        disposed.append(self)
        await original_close(self)

    monkeypatch.setattr(DatabaseSessionManager, "close", recording_close)

    async with app.router.lifespan_context(app):
        manager = app.state.db_manager

    assert disposed == [manager]
