"""日志行相关类型定义."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from markupsafe import Markup


@dataclass(frozen=True, slots=True)
class LogEntry:
    """日志表中的一行(只读).

    字段保持数据库原值,不做类型修正;校验与转换统一交给展示层.
    """

    level: Any
    time: Any
    message: Any
    channel: Any
    app: Any

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> LogEntry:
        """从查询结果映射构造日志行."""
        return cls(
            level=row.get("level"),
            time=row.get("time"),
            message=row.get("message"),
            channel=row.get("channel"),
            app=row.get("app"),
        )


@dataclass(frozen=True, slots=True)
class LevelBadge:
    """日志级别单元格: 图标 + 文案."""

    code: int
    icon: str
    label: str
    css_class: str


@dataclass(frozen=True, slots=True)
class DisplayRow:
    """格式化后的单行展示数据.

    文本字段均已完成 HTML 转义,模板中可直接输出.
    """

    level: LevelBadge | None
    date: Markup
    time: Markup
    message: Markup
    channel: Markup
    app: Markup
    is_serialized: bool = False

    def to_dict(self) -> dict[str, Any]:
        """转换为 JSON 友好的字典.

        JSON 由客户端自行转义,文本字段还原为未转义的原文.
        """
        return {
            "level": (
                {
                    "code": self.level.code,
                    "icon": self.level.icon,
                    "label": self.level.label,
                    "css_class": self.level.css_class,
                }
                if self.level
                else None
            ),
            "date": self.date.unescape(),
            "time": self.time.unescape(),
            "message": self.message.unescape(),
            "channel": self.channel.unescape(),
            "app": self.app.unescape(),
            "is_serialized": self.is_serialized,
        }
