"""WP Monolog Viewer - Flask 应用初始化.

只读浏览 Monolog 日志表的管理页面.
"""

import logging
from importlib import import_module
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Blueprint, Flask, render_template, request
from flask.typing import ResponseReturnValue
from flask_sqlalchemy import SQLAlchemy
from werkzeug.exceptions import HTTPException

from monolog_viewer.errors import AppError
from monolog_viewer.settings import Settings
from monolog_viewer.utils.response_utils import jsonify_unified_error, unified_error_response
from monolog_viewer.utils.structlog_config import configure_structlog, get_system_logger

# 初始化扩展
db = SQLAlchemy()


def create_app(*, settings: Settings | None = None) -> Flask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.

    Returns:
        Flask: Flask应用实例

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    app.config.from_mapping(resolved_settings.to_flask_config())

    # 配置会话安全
    configure_security(app)

    # 初始化扩展
    db.init_app(app)

    # 注册蓝图
    configure_blueprints(app)

    # 配置日志
    configure_logging(app)

    # 配置统一日志系统
    configure_structlog(app)

    # 设置全局日志级别
    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    # 注册全局错误处理器
    configure_error_handlers(app)

    return app


def configure_security(app: Flask) -> None:
    """配置会话 Cookie 选项.

    会话只用于保存每页数量偏好.
    """
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_NAME"] = "monolog_viewer_session"


def configure_blueprints(app: Flask) -> None:
    """注册所有蓝图以暴露路由."""
    blueprint_specs: list[tuple[str, str, str | None]] = [
        ("monolog_viewer.routes.main", "main_bp", None),
        ("monolog_viewer.routes.logs", "logs_bp", "/logs"),
    ]

    blueprints: list[tuple[Blueprint, str | None]] = []
    for module_path, attr_name, prefix in blueprint_specs:
        module = import_module(module_path)
        blueprints.append((getattr(module, attr_name), prefix))

    for blueprint, prefix in blueprints:
        if prefix:
            app.register_blueprint(blueprint, url_prefix=prefix)
        else:
            app.register_blueprint(blueprint)


def configure_logging(app: Flask) -> None:
    """配置文件日志处理器(debug/testing 模式下不写文件)."""
    if app.debug or app.testing:
        return

    log_path = Path(app.config["LOG_FILE"])
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=app.config["LOG_MAX_SIZE"],
        backupCount=app.config["LOG_BACKUP_COUNT"],
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"),
    )
    file_handler.setLevel(getattr(logging, app.config["LOG_LEVEL"]))
    logging.getLogger().addHandler(file_handler)
    get_system_logger().info("WP Monolog Viewer 启动", module="system", log_file=str(log_path))


def configure_error_handlers(app: Flask) -> None:
    """注册错误处理器: JSON 接口返回统一错误载荷,页面渲染错误页."""

    def _wants_json() -> bool:
        return request.path.startswith("/logs/api/") or request.accept_mimetypes.best == "application/json"

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError) -> ResponseReturnValue:
        if _wants_json():
            return jsonify_unified_error(error)
        payload, status_code = unified_error_response(error)
        return render_template("errors/error.html", error=payload, status_code=status_code), status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception) -> ResponseReturnValue:
        if isinstance(error, HTTPException):
            return error
        get_system_logger().error("未处理的异常", module="system", error_type=error.__class__.__name__, exc_info=error)
        if _wants_json():
            return jsonify_unified_error(error)
        payload, status_code = unified_error_response(error)
        return render_template("errors/error.html", error=payload, status_code=status_code), status_code
