"""数据模型模块."""

from monolog_viewer.models.log_entry import build_log_table

__all__ = ["build_log_table"]
