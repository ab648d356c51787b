"""常量模块。

集中管理系统常量。

主要常量：
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
- MonologLevel / LEVEL_DISPLAY: 日志级别与展示元数据
- SORTABLE_COLUMNS 等: 日志表排序/分页白名单
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

from .log_columns import (
    DEFAULT_PER_PAGE,
    DEFAULT_SORT_COLUMN,
    DEFAULT_SORT_DIRECTION,
    LOG_COLUMN_LABELS,
    MAX_PER_PAGE,
    SERIALIZED_PLACEHOLDER,
    SORT_DIRECTIONS,
    SORTABLE_COLUMNS,
    TIME_PLACEHOLDER,
)
from .log_levels import LEVEL_DISPLAY, LevelDisplay, MonologLevel
from .system_constants import ErrorCategory, ErrorMessages, ErrorSeverity, SuccessMessages

__all__ = [
    "DEFAULT_PER_PAGE",
    "DEFAULT_SORT_COLUMN",
    "DEFAULT_SORT_DIRECTION",
    "LEVEL_DISPLAY",
    "LOG_COLUMN_LABELS",
    "MAX_PER_PAGE",
    "SERIALIZED_PLACEHOLDER",
    "SORTABLE_COLUMNS",
    "SORT_DIRECTIONS",
    "TIME_PLACEHOLDER",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "HttpStatus",
    "LevelDisplay",
    "MonologLevel",
    "SuccessMessages",
]
