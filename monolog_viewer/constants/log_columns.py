"""日志表列定义与排序/分页白名单.

列顺序即页面展示顺序. 排序字段与方向只允许取自这里的常量,
请求参数不会以任何形式拼接进 SQL.
"""

from __future__ import annotations

from typing import Final

LOG_COLUMN_LABELS: Final[tuple[tuple[str, str], ...]] = (
    ("level", "Log Level"),
    ("time", "Date / Time"),
    ("message", "Message"),
    ("channel", "Channel"),
    ("app", "App"),
)

SORTABLE_COLUMNS: Final[frozenset[str]] = frozenset(key for key, _ in LOG_COLUMN_LABELS)
DEFAULT_SORT_COLUMN: Final[str] = "time"

SORT_DIRECTIONS: Final[frozenset[str]] = frozenset({"asc", "desc"})
DEFAULT_SORT_DIRECTION: Final[str] = "asc"

DEFAULT_PER_PAGE: Final[int] = 100
MAX_PER_PAGE: Final[int] = 500

SERIALIZED_PLACEHOLDER: Final[str] = "-- serialized data --"
TIME_PLACEHOLDER: Final[str] = "-"
