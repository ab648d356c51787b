"""日志列表页 Service.

职责:
- 组织 repository、formatter、presenter 的调用并输出视图模型
- 将日志表不可用降级为 "no logs available" 状态,不向宿主页面抛出
"""

from __future__ import annotations

from monolog_viewer.errors import StoreUnavailable
from monolog_viewer.repositories.log_store_repository import LogStoreRepository
from monolog_viewer.services.log_viewer.log_entry_formatter import LogEntryFormatter
from monolog_viewer.services.log_viewer.log_table_presenter import (
    LOG_COLUMNS,
    LogTablePresenter,
    calculate_total_pages,
)
from monolog_viewer.types.log_table import LogListFilters, SortState, TableViewModel
from monolog_viewer.utils.structlog_config import log_info, log_warning


class LogListPageService:
    """日志列表业务编排服务."""

    def __init__(
        self,
        repository: LogStoreRepository | None = None,
        formatter: LogEntryFormatter | None = None,
        presenter: LogTablePresenter | None = None,
    ) -> None:
        """初始化服务并注入依赖."""
        self._repository = repository or LogStoreRepository()
        self._formatter = formatter or LogEntryFormatter()
        self._presenter = presenter or LogTablePresenter()

    def build_page(self, filters: LogListFilters) -> TableViewModel:
        """读取并格式化一页日志."""
        sort = SortState(column=filters.order_by, direction=filters.order_direction)
        try:
            entries, total = self._repository.fetch_page(
                filters.order_by,
                filters.order_direction,
                filters.page,
                filters.per_page,
            )
            page = filters.page
            total_pages = calculate_total_pages(total, filters.per_page)
            if total_pages and page > total_pages:
                # 请求页超过末页时直接展示末页
                page = total_pages
                entries, total = self._repository.fetch_page(
                    filters.order_by,
                    filters.order_direction,
                    page,
                    filters.per_page,
                )
        except StoreUnavailable as exc:
            log_warning(
                "日志表不可用,展示空列表",
                module="logs",
                action="build_page",
                exception=exc,
                **exc.extra,
            )
            return self._presenter.build_unavailable_view_model(filters.per_page, sort=sort)

        rows = [self._formatter.format_entry(entry) for entry in entries]
        view_model = self._presenter.build_view_model(
            LOG_COLUMNS,
            rows,
            total,
            page,
            filters.per_page,
            sort=sort,
        )
        log_info(
            "日志列表加载完成",
            module="logs",
            action="build_page",
            page=view_model.pagination.current_page,
            per_page=filters.per_page,
            total=total,
        )
        return view_model
