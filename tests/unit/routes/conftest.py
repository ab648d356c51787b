# tests/unit/routes/conftest.py
"""路由测试专用 fixtures.

提供基于临时 SQLite 文件的测试应用与造数 helper.
"""

import pytest

from monolog_viewer import create_app, db
from monolog_viewer.models.log_entry import build_log_table
from monolog_viewer.settings import Settings


@pytest.fixture(scope="function")
def app(monkeypatch, tmp_path):
    """创建测试应用实例(日志表尚未创建)."""
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'wordpress.db'}")

    settings = Settings.load()
    app = create_app(settings=settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture(scope="function")
def client(app):
    """创建测试客户端."""
    return app.test_client()


@pytest.fixture(scope="function")
def seed_logs(app):
    """创建 wp_log 表并写入日志行."""

    def _seed(rows: list[dict[str, object]]) -> None:
        defaults = {"level": 200, "time": 1700000000, "message": "", "channel": "app", "app": "site"}
        with app.app_context():
            table = build_log_table(app.config["LOG_TABLE_NAME"])
            table.metadata.create_all(db.engine)
            with db.engine.begin() as connection:
                if rows:
                    connection.execute(table.insert(), [{**defaults, **row} for row in rows])

    return _seed
