"""路由安全执行与结构化日志助手.

提供 `log_with_context` 与 `safe_route_call` 两个 helper,用于复用结构化日志字段,
并集中处理视图层的异常捕获.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, TypeVar

from werkzeug.exceptions import HTTPException

from monolog_viewer.errors import AppError, SystemError
from monolog_viewer.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

R = TypeVar("R")
LogLevel = Literal["debug", "info", "warning", "error", "critical"]
DEFAULT_EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def log_with_context(
    level: LogLevel,
    event: str,
    *,
    module: str,
    action: str,
    context: dict[str, Any] | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """记录带有统一上下文字段的结构化日志.

    Args:
        level: 日志级别,使用 structlog 的方法名,例如 "info"、"error".
        event: 日志事件描述.
        module: 所属模块或领域,用于快速过滤.
        action: 当前操作名称,通常对应视图函数名.
        context: 业务上下文字段.
        extra: 额外字段,如异常类型.

    """
    logger = get_logger("app")
    payload: dict[str, Any] = {"module": module, "action": action}
    if context:
        payload.update(context)
    if extra:
        payload.update(extra)

    log_method = getattr(logger, level, logger.error)
    log_method(event, **payload)


def safe_route_call(
    func: Callable[[], R],
    *,
    module: str,
    action: str,
    public_error: str,
    context: dict[str, Any] | None = None,
) -> R:
    """安全执行视图逻辑,集中处理日志与异常转换.

    Args:
        func: 真实的业务函数,建议为局部闭包以捕获参数.
        module: 记录日志用的模块名称.
        action: 业务动作名称.
        public_error: 暴露给客户端的统一错误文案.
        context: 附加到日志的上下文.

    Returns:
        业务函数的执行结果.

    Raises:
        AppError: 业务逻辑主动抛出,或意外异常被包装为 SystemError.

    """
    event = f"{action}执行失败"
    try:
        return func()
    except DEFAULT_EXPECTED_EXCEPTIONS as exc:
        log_with_context(
            "warning",
            event,
            module=module,
            action=action,
            context=context,
            extra={"error_type": exc.__class__.__name__, "error_message": str(exc)},
        )
        raise
    except Exception as exc:
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context,
            extra={"error_type": exc.__class__.__name__, "unexpected": True},
        )
        raise SystemError(public_error) from exc
