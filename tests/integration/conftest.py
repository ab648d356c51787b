# tests/integration/conftest.py
"""集成测试专用 fixtures.

连接真实的 WordPress 数据库(只读).
"""

import os

import pytest

# 集成测试需要真实数据库，检查环境变量
if "DATABASE_URL" not in os.environ or "sqlite" in os.environ.get("DATABASE_URL", ""):
    pytest.skip(
        "集成测试需要真实数据库，请设置 DATABASE_URL 环境变量",
        allow_module_level=True,
    )

from monolog_viewer import create_app


@pytest.fixture(scope="session")
def app():
    """创建测试应用实例（整个测试会话复用）."""
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture(scope="function")
def client(app):
    """测试客户端，每个测试函数独立."""
    return app.test_client()
