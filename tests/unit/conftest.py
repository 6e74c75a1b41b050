# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离、字段声明与内存数据源等通用 fixtures。
"""

import pytest

from admin_table.repositories.memory_data_source import MemoryDataSource
from admin_table.settings import Settings

_TABLE_ENV_KEYS = (
    "TABLE_DEFAULT_ALIAS",
    "TABLE_DEFAULT_DIRECTION",
    "TABLE_DEFAULT_PAGE",
    "TABLE_DEFAULT_PER_PAGE",
    "TABLE_PER_PAGE_MIN",
    "TABLE_PER_PAGE_MAX",
    "ENABLE_DEBUG_LOG",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    避免开发者本机环境变量影响测试稳定性。
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    for key in _TABLE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def raw_fields() -> dict[str, dict[str, object]]:
    """与旧版列表测试一致的字段声明."""
    return {
        "name": {"order": "asc"},
        "slug": {"order": "true"},
        "is_active": {"order": "false"},
    }


@pytest.fixture
def user_rows() -> list[dict[str, object]]:
    names = ["delta", "alpha", "echo", "charlie", "bravo"]
    return [
        {"id": index + 1, "name": name, "slug": f"{name}-slug", "is_active": index % 2 == 0}
        for index, name in enumerate(names)
    ]


@pytest.fixture
def memory_source(user_rows) -> MemoryDataSource:
    return MemoryDataSource(user_rows, alias="a")
