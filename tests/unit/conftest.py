# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供内存 SQLite 日志表与造数 helper.
"""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from monolog_viewer.models.log_entry import build_log_table


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    避免开发者本机环境变量影响测试稳定性.
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    isolated_env = (
        "FLASK_DEBUG",
        "LOG_TABLE_NAME",
        "LOGS_PER_PAGE",
        "LOGS_PER_PAGE_MAX",
        "DISPLAY_TIMEZONE",
        "ENABLE_DEBUG_LOG",
    )
    for name in isolated_env:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def log_table():
    """默认的 wp_log 表定义."""
    return build_log_table("wp_log")


@pytest.fixture
def log_engine(log_table):
    """已建好 wp_log 表的内存 SQLite Engine(单连接共享)."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    log_table.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def insert_logs(log_engine, log_table):
    """写入测试日志行的 helper.

    Example:
        >>> insert_logs([{"level": 300, "time": 1700000000, "message": "Disk low"}])

    """

    def _insert(rows: list[dict[str, object]]) -> None:
        defaults = {"level": 200, "time": 1700000000, "message": "", "channel": "app", "app": "site"}
        with log_engine.begin() as connection:
            connection.execute(log_table.insert(), [{**defaults, **row} for row in rows])

    return _insert
