"""Monolog 日志表结构.

日志表由外部的 Monolog MySQL handler 创建并写入,本项目只读.
表名可配置(WordPress 默认为 `{prefix}log`),因此使用 SQLAlchemy Core 的 Table
按名称构建,而不是固定 `__tablename__` 的 ORM 模型.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Column, Integer, MetaData, String, Table, Text


@lru_cache(maxsize=8)
def build_log_table(table_name: str) -> Table:
    """按表名构建日志表定义.

    Args:
        table_name: 表名,支持 `schema.table` 形式.

    Returns:
        Table: 只包含列表页需要的五个字段.

    """
    schema, _, name = table_name.rpartition(".")
    return Table(
        name,
        MetaData(),
        Column("channel", String(255)),
        Column("level", Integer),
        Column("message", Text),
        Column("time", Integer),
        Column("app", String(255)),
        schema=schema or None,
    )
