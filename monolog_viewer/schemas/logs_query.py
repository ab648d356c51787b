"""日志列表 query schema.

目标:
- 将 orderby/order/page/per_page 的规范化、默认值与边界处理收敛到单一入口
- 排序参数只允许白名单值,非法值降级为默认值而不是报错
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from monolog_viewer.constants import DEFAULT_SORT_COLUMN, DEFAULT_SORT_DIRECTION, MAX_PER_PAGE
from monolog_viewer.schemas.base import QuerySchema
from monolog_viewer.types.log_table import LogListFilters
from monolog_viewer.utils.sort_allowlist import resolve_sort_column, resolve_sort_direction

_DEFAULT_PAGE = 1


def _parse_int(value: Any) -> int | None:
    """宽松整数解析,无法解析时返回 None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return int(stripped, 10)
        except ValueError:
            return None
    return None


class LogsListQuery(QuerySchema):
    """日志列表 query 参数 schema."""

    order_by: str = Field(default=DEFAULT_SORT_COLUMN, validation_alias=AliasChoices("orderby", "order_by"))
    order: str = Field(default=DEFAULT_SORT_DIRECTION, validation_alias=AliasChoices("order", "order_direction"))
    page: int = Field(default=_DEFAULT_PAGE, validation_alias=AliasChoices("page", "paged"))
    per_page: int | None = None

    @field_validator("order_by", mode="before")
    @classmethod
    def _parse_order_by(cls, value: Any) -> str:
        return resolve_sort_column(value)

    @field_validator("order", mode="before")
    @classmethod
    def _parse_order(cls, value: Any) -> str:
        return resolve_sort_direction(value)

    @field_validator("page", mode="before")
    @classmethod
    def _parse_page(cls, value: Any) -> int:
        parsed = _parse_int(value)
        if parsed is None:
            return _DEFAULT_PAGE
        return max(parsed, 1)

    @field_validator("per_page", mode="before")
    @classmethod
    def _parse_per_page(cls, value: Any) -> int | None:
        parsed = _parse_int(value)
        if parsed is None:
            return None
        return max(min(parsed, MAX_PER_PAGE), 1)

    def to_filters(self, *, per_page: int) -> LogListFilters:
        """转换为列表查询条件.

        Args:
            per_page: 最终生效的每页数量(请求值、用户偏好或默认值).

        """
        return LogListFilters(
            order_by=self.order_by,
            order_direction=self.order,
            page=self.page,
            per_page=per_page,
        )
