"""日志表排序参数白名单校验.

`ensure_*` 为严格版本,非法值直接抛出异常;
`resolve_*` 为列表页使用的宽松版本,非法值记录告警后回退默认值.
"""

from __future__ import annotations

from monolog_viewer.constants import (
    DEFAULT_SORT_COLUMN,
    DEFAULT_SORT_DIRECTION,
    SORT_DIRECTIONS,
    SORTABLE_COLUMNS,
)
from monolog_viewer.errors import InvalidSortColumn, InvalidSortDirection
from monolog_viewer.utils.structlog_config import log_warning


def _normalize(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def ensure_sort_column(value: object) -> str:
    """校验排序字段,不在白名单内时抛出 InvalidSortColumn."""
    cleaned = _normalize(value)
    if cleaned not in SORTABLE_COLUMNS:
        raise InvalidSortColumn(extra={"orderby": repr(value)[:64]})
    return cleaned


def ensure_sort_direction(value: object) -> str:
    """校验排序方向,仅允许 asc/desc."""
    cleaned = _normalize(value)
    if cleaned not in SORT_DIRECTIONS:
        raise InvalidSortDirection(extra={"order": repr(value)[:64]})
    return cleaned


def resolve_sort_column(value: object) -> str:
    """解析排序字段,空值或非法值回退为 `time`."""
    if not _normalize(value):
        return DEFAULT_SORT_COLUMN
    try:
        return ensure_sort_column(value)
    except InvalidSortColumn as exc:
        log_warning(
            "排序字段不在白名单内,已回退默认字段",
            module="logs",
            action="resolve_sort_column",
            fallback=DEFAULT_SORT_COLUMN,
            **exc.extra,
        )
        return DEFAULT_SORT_COLUMN


def resolve_sort_direction(value: object) -> str:
    """解析排序方向,空值或非法值回退为 `asc`."""
    if not _normalize(value):
        return DEFAULT_SORT_DIRECTION
    try:
        return ensure_sort_direction(value)
    except InvalidSortDirection as exc:
        log_warning(
            "排序方向非法,已回退默认方向",
            module="logs",
            action="resolve_sort_direction",
            fallback=DEFAULT_SORT_DIRECTION,
            **exc.extra,
        )
        return DEFAULT_SORT_DIRECTION
