"""Unit tests for settings parsing."""

import pytest
from libs.common.config import Settings
from libs.db.config import GROUP_CONCAT_MAX_LEN, engine_connect_args


@pytest.mark.unit
def test_plain_mysql_url_uses_async_driver():
    settings = Settings(DATABASE_URL="mysql://u:p@db:3306/nisapoti")
    assert settings.DATABASE_URL == "mysql+aiomysql://u:p@db:3306/nisapoti"


@pytest.mark.unit
def test_pool_defaults(monkeypatch):
    for name in ("DB_POOL_SIZE", "DB_MAX_OVERFLOW", "DB_POOL_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(DATABASE_URL="mysql+aiomysql://u:p@db/nisapoti", _env_file=None)
    assert settings.DB_POOL_SIZE == 10
    assert settings.DB_MAX_OVERFLOW == 0
    assert settings.DB_POOL_TIMEOUT == 60


@pytest.mark.unit
def test_is_production():
    settings = Settings(DATABASE_URL="sqlite+aiosqlite://", ENVIRONMENT="production")
    assert settings.is_production


@pytest.mark.unit
def test_mysql_connections_raise_group_concat_limit():
    args = engine_connect_args("mysql+aiomysql://u:p@db/nisapoti")
    assert args == {
        "init_command": f"SET SESSION group_concat_max_len = {GROUP_CONCAT_MAX_LEN}"
    }
    assert GROUP_CONCAT_MAX_LEN > 1024


@pytest.mark.unit
def test_other_backends_get_no_connect_args():
    assert engine_connect_args("sqlite+aiosqlite://") == {}
