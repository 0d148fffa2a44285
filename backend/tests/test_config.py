"""Settings — URL normalization and defaults."""

from employee_api.config import Settings


def test_plain_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@h:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@h:5432/db"


def test_other_urls_left_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_pool_defaults():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_pool_size == 20
    assert settings.database_max_overflow == 10
