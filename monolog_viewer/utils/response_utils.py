"""Monolog Viewer - 统一响应工具.

提供统一的成功/错误响应结构,避免在路由层散落 JSON 拼装逻辑.
"""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

from monolog_viewer.constants import HttpStatus
from monolog_viewer.constants.system_constants import ErrorMessages, SuccessMessages
from monolog_viewer.errors import AppError, map_exception_to_status
from monolog_viewer.utils.time_utils import time_utils


def unified_success_response(
    data: object | None = None,
    message: object | None = None,
    *,
    status: int = HttpStatus.OK,
) -> tuple[dict[str, Any], int]:
    """生成统一的成功响应载荷.

    Returns:
        (响应载荷字典, HTTP 状态码).

    """
    payload: dict[str, Any] = {
        "success": True,
        "error": False,
        "message": str(message) if message is not None else SuccessMessages.OPERATION_SUCCESS,
        "timestamp": time_utils.now().isoformat(),
    }
    if data is not None:
        payload["data"] = data
    return payload, status


def unified_error_response(error: BaseException, *, status_code: int | None = None) -> tuple[dict[str, Any], int]:
    """生成统一的错误响应载荷.

    非 AppError 的异常不会把原始文案暴露给客户端.
    """
    if isinstance(error, AppError):
        message = error.message
        message_code = error.message_key
        category = error.category.value
        severity = error.severity.value
    else:
        message = ErrorMessages.INTERNAL_ERROR
        message_code = "INTERNAL_ERROR"
        category = "system"
        severity = "high"

    safe_error = error if isinstance(error, Exception) else Exception(str(error))
    final_status = status_code or map_exception_to_status(safe_error, default=HttpStatus.INTERNAL_SERVER_ERROR)
    payload: dict[str, Any] = {
        "success": False,
        "error": True,
        "message": message,
        "message_code": message_code,
        "category": category,
        "severity": severity,
        "timestamp": time_utils.now().isoformat(),
    }
    return payload, int(final_status)


def jsonify_unified_success(*args: Any, **kwargs: Any) -> tuple[Response, int]:
    """返回 Flask Response 对象的成功响应便捷函数."""
    payload, status = unified_success_response(*args, **kwargs)
    return jsonify(payload), status


def jsonify_unified_error(error: BaseException, *, status_code: int | None = None) -> tuple[Response, int]:
    """返回 Flask Response 对象的错误响应便捷函数."""
    payload, status = unified_error_response(error, status_code=status_code)
    return jsonify(payload), status
