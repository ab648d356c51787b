"""日志表 Repository.

职责:
- 仅负责 Query 组装与数据库读取
- 不做格式化、不返回 Response、不写入
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import current_app
from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError

from monolog_viewer import db
from monolog_viewer.constants import MAX_PER_PAGE
from monolog_viewer.errors import StoreUnavailable
from monolog_viewer.models.log_entry import build_log_table
from monolog_viewer.types.log_entries import LogEntry
from monolog_viewer.utils.sort_allowlist import resolve_sort_column, resolve_sort_direction
from monolog_viewer.utils.structlog_config import log_debug, log_error

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.engine import Engine


class LogStoreRepository:
    """日志表只读查询 Repository."""

    def __init__(self, engine: Engine | None = None, *, table_name: str | None = None) -> None:
        """初始化 Repository.

        Args:
            engine: 可选的 SQLAlchemy Engine,缺省使用 Flask-SQLAlchemy 的 `db.engine`.
            table_name: 可选的日志表名,缺省读取 `LOG_TABLE_NAME` 配置.

        """
        self._engine = engine
        self._table_name = table_name

    @property
    def engine(self) -> Engine:
        return self._engine or db.engine

    @property
    def table(self) -> Table:
        table_name = self._table_name or str(current_app.config["LOG_TABLE_NAME"])
        return build_log_table(table_name)

    def fetch_page(
        self,
        order_by: object,
        order_direction: object,
        page: int,
        per_page: int,
    ) -> tuple[list[LogEntry], int]:
        """按排序与分页条件读取一页日志.

        Args:
            order_by: 排序字段,非白名单值回退为 `time`.
            order_direction: 排序方向,非 asc/desc 回退为 `asc`.
            page: 页码,小于 1 时按 1 处理.
            per_page: 每页数量,裁剪到 [1, MAX_PER_PAGE].

        Returns:
            (当前页日志行, 总行数). 表为空时返回 ([], 0).

        Raises:
            StoreUnavailable: 日志表不存在或数据库连接失败.

        """
        column_key = resolve_sort_column(order_by)
        direction = resolve_sort_direction(order_direction)
        resolved_page = max(int(page), 1)
        resolved_per_page = min(max(int(per_page), 1), MAX_PER_PAGE)
        offset = (resolved_page - 1) * resolved_per_page

        table = self.table
        order_column = table.c[column_key]
        ordering = asc(order_column) if direction == "asc" else desc(order_column)
        page_query = (
            select(table.c.level, table.c.time, table.c.message, table.c.channel, table.c.app)
            .order_by(ordering)
            .limit(resolved_per_page)
            .offset(offset)
        )
        count_query = select(func.count()).select_from(table)

        try:
            with self.engine.connect() as connection:
                total = int(connection.execute(count_query).scalar_one() or 0)
                rows = connection.execute(page_query).mappings().all()
        except SQLAlchemyError as exc:
            log_error(
                "读取日志表失败",
                module="log_store",
                exception=exc,
                table=table.fullname,
            )
            raise StoreUnavailable(extra={"table": table.fullname}) from exc

        log_debug(
            "日志分页查询完成",
            module="log_store",
            order_by=column_key,
            order=direction,
            page=resolved_page,
            per_page=resolved_per_page,
            total=total,
            returned=len(rows),
        )
        return [LogEntry.from_row(row) for row in rows], total
