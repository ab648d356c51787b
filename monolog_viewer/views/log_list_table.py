"""日志列表组件.

实现宿主页面依赖的列表接口 {get_columns, get_sortable_columns, prepare_page, render}.
每个请求构建一个实例,内部服务对象无状态.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import current_app, render_template

from monolog_viewer.services.log_viewer.log_entry_formatter import LogEntryFormatter
from monolog_viewer.services.log_viewer.log_list_page_service import LogListPageService
from monolog_viewer.services.log_viewer.log_table_presenter import LOG_COLUMNS
from monolog_viewer.utils.time_utils import resolve_timezone

if TYPE_CHECKING:
    from monolog_viewer.types.log_table import LogListFilters, TableViewModel


class LogListTable:
    """日志表格组件."""

    template_name = "logs/_table.html"

    def __init__(self, service: LogListPageService | None = None) -> None:
        self._service = service
        self.view_model: TableViewModel | None = None

    @property
    def service(self) -> LogListPageService:
        if self._service is None:
            tz = resolve_timezone(str(current_app.config.get("DISPLAY_TIMEZONE") or ""))
            self._service = LogListPageService(formatter=LogEntryFormatter(tz))
        return self._service

    def get_columns(self) -> dict[str, str]:
        """列 key 到表头文案的有序映射."""
        return {column.key: column.label for column in LOG_COLUMNS}

    def get_sortable_columns(self) -> dict[str, tuple[str, bool]]:
        """可排序列: key -> (排序字段, 首次点击是否降序)."""
        return {column.key: (column.key, True) for column in LOG_COLUMNS if column.sortable}

    def prepare_page(self, filters: LogListFilters) -> TableViewModel:
        """读取当前页数据并缓存视图模型."""
        self.view_model = self.service.build_page(filters)
        return self.view_model

    def render(self) -> str:
        """渲染表格 HTML 片段,需先调用 prepare_page."""
        if self.view_model is None:
            raise RuntimeError("prepare_page() must be called before render()")
        return render_template(
            self.template_name,
            table=self.view_model,
            sortable_columns=self.get_sortable_columns(),
        )
