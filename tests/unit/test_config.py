"""Unit tests for settings and engine options."""

from linkhub.config import Settings, get_settings
from linkhub.database import build_engine_kwargs


def test_defaults():
    s = Settings(_env_file=None)
    assert s.app_name == "LinkHub API"
    assert s.default_page_size == 20
    assert s.max_page_size == 100
    assert s.post_max_length == 3000
    assert s.trending_limit == 8
    assert s.admin_emails == []
    assert s.database_url.startswith("postgresql+asyncpg://")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_POOL_SIZE", "3")
    monkeypatch.setenv("ADMIN_EMAILS", '["root@example.com"]')
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.database_pool_size == 3
    assert s.admin_emails == ["root@example.com"]
    assert s.log_level == "DEBUG"


def test_get_settings_is_singleton():
    assert get_settings() is get_settings()


def test_engine_kwargs_sqlite_has_no_pool_options():
    s = Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")
    kwargs = build_engine_kwargs(s)
    assert kwargs == {"echo": False}


def test_engine_kwargs_asyncpg_sets_bounds_and_timeout():
    s = Settings(
        _env_file=None,
        database_pool_size=7,
        database_max_overflow=2,
        database_pool_timeout=11,
        database_command_timeout=4,
    )
    kwargs = build_engine_kwargs(s)
    assert kwargs["pool_size"] == 7
    assert kwargs["max_overflow"] == 2
    assert kwargs["pool_timeout"] == 11
    assert kwargs["pool_pre_ping"] is True
    assert kwargs["connect_args"] == {"command_timeout": 4}
