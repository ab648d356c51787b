"""Monolog Viewer - 常量定义模块

统一管理错误分类、严重度与提示文案.
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    DATABASE = "database"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"

    # 日志查看相关
    LOG_STORE_UNAVAILABLE = "日志表不可用"
    INVALID_SORT_COLUMN = "不支持的排序字段"
    INVALID_SORT_DIRECTION = "不支持的排序方向"
    MALFORMED_LEVEL = "日志级别不是有效整数"


class SuccessMessages:
    """成功消息常量."""

    OPERATION_SUCCESS = "操作成功"
    LOGS_LOADED = "获取日志列表成功"
