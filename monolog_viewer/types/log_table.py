"""日志列表页视图模型与列表组件接口."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from monolog_viewer.types.log_entries import DisplayRow


@dataclass(frozen=True, slots=True)
class LogListFilters:
    """列表查询条件(已完成白名单校验与边界裁剪)."""

    order_by: str
    order_direction: str
    page: int
    per_page: int


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """列定义."""

    key: str
    label: str
    sortable: bool = True


@dataclass(frozen=True, slots=True)
class SortState:
    """实际生效的排序条件."""

    column: str
    direction: str

    def next_direction(self, column: str) -> str:
        """点击某列表头后应使用的排序方向.

        当前排序列在升降序间切换,其它列首次点击为降序.
        """
        if column == self.column:
            return "desc" if self.direction == "asc" else "asc"
        return "desc"


@dataclass(frozen=True, slots=True)
class PaginationInfo:
    """分页信息."""

    total_items: int
    per_page: int
    current_page: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_items": self.total_items,
            "per_page": self.per_page,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
        }


@dataclass(frozen=True, slots=True)
class TableViewModel:
    """日志表渲染所需的全部数据,每个请求重新构建."""

    columns: list[ColumnSpec]
    rows: list[DisplayRow]
    pagination: PaginationInfo
    sort: SortState
    no_items: bool = False
    store_available: bool = True

    def to_dict(self) -> dict[str, Any]:
        """转换为 JSON 友好的字典."""
        return {
            "columns": [
                {"key": column.key, "label": column.label, "sortable": column.sortable} for column in self.columns
            ],
            "rows": [row.to_dict() for row in self.rows],
            "pagination": self.pagination.to_dict(),
            "sort": {"column": self.sort.column, "direction": self.sort.direction},
            "no_items": self.no_items,
            "store_available": self.store_available,
        }


class ListTable(Protocol):
    """列表组件接口,宿主页面只依赖这四个方法."""

    def get_columns(self) -> dict[str, str]: ...

    def get_sortable_columns(self) -> dict[str, tuple[str, bool]]: ...

    def prepare_page(self, filters: LogListFilters) -> TableViewModel: ...

    def render(self) -> str: ...
