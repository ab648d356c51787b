"""日志列表视图模型组装."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from monolog_viewer.constants import DEFAULT_SORT_COLUMN, DEFAULT_SORT_DIRECTION, LOG_COLUMN_LABELS
from monolog_viewer.types.log_table import ColumnSpec, PaginationInfo, SortState, TableViewModel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from monolog_viewer.types.log_entries import DisplayRow

LOG_COLUMNS: tuple[ColumnSpec, ...] = tuple(
    ColumnSpec(key=key, label=label, sortable=True) for key, label in LOG_COLUMN_LABELS
)
DEFAULT_SORT = SortState(column=DEFAULT_SORT_COLUMN, direction=DEFAULT_SORT_DIRECTION)


def calculate_total_pages(total_count: int, per_page: int) -> int:
    """总页数,没有数据时为 0."""
    if total_count <= 0:
        return 0
    return math.ceil(total_count / max(per_page, 1))


def clamp_page(page: int, total_pages: int) -> int:
    """将页码裁剪到 [1, max(1, total_pages)]."""
    return min(max(page, 1), max(1, total_pages))


class LogTablePresenter:
    """将格式化后的行与分页信息组装为 TableViewModel."""

    def build_view_model(
        self,
        columns: Sequence[ColumnSpec],
        rows: Sequence[DisplayRow],
        total_count: int,
        page: int,
        per_page: int,
        *,
        sort: SortState = DEFAULT_SORT,
    ) -> TableViewModel:
        """组装视图模型.

        Args:
            columns: 列定义,通常为 `LOG_COLUMNS`.
            rows: 已格式化的当前页数据.
            total_count: 总行数.
            page: 请求页码.
            per_page: 每页数量.
            sort: 实际生效的排序条件,用于表头排序链接.

        Returns:
            TableViewModel: 总行数为 0 时 `no_items` 为 True.

        """
        total = max(int(total_count), 0)
        total_pages = calculate_total_pages(total, per_page)
        pagination = PaginationInfo(
            total_items=total,
            per_page=per_page,
            current_page=clamp_page(page, total_pages),
            total_pages=total_pages,
        )
        return TableViewModel(
            columns=list(columns),
            rows=list(rows) if total else [],
            pagination=pagination,
            sort=sort,
            no_items=total == 0,
        )

    def build_unavailable_view_model(self, per_page: int, *, sort: SortState = DEFAULT_SORT) -> TableViewModel:
        """日志表不可用时的空视图."""
        return TableViewModel(
            columns=list(LOG_COLUMNS),
            rows=[],
            pagination=PaginationInfo(total_items=0, per_page=per_page, current_page=1, total_pages=0),
            sort=sort,
            no_items=True,
            store_available=False,
        )
