"""日志行格式化.

将数据库原始行转换为可直接输出到 HTML 的展示数据.
message 内容不可信,所有文本的转义都在这里完成,模板层不再处理.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

from markupsafe import Markup, escape

from monolog_viewer.constants import LEVEL_DISPLAY, SERIALIZED_PLACEHOLDER
from monolog_viewer.errors import MalformedLevel
from monolog_viewer.types.log_entries import DisplayRow, LevelBadge, LogEntry
from monolog_viewer.utils.serialized_payload import is_serialized_payload
from monolog_viewer.utils.time_utils import UTC_TZ, TimeFormats, time_utils


def coerce_level(value: object) -> int:
    """将 level 字段转换为整数.

    允许 int 与纯数字字符串(部分驱动会以字符串返回整数列).

    Raises:
        MalformedLevel: 值不是整数.

    """
    if isinstance(value, bool):
        raise MalformedLevel(extra={"level": repr(value)})
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.removeprefix("-").isdigit():
            return int(stripped, 10)
    raise MalformedLevel(extra={"level": repr(value)[:64]})


def _text(value: object) -> Markup:
    if value is None:
        return Markup("")
    return escape(value)


class LogEntryFormatter:
    """日志行格式化器(无状态,可跨请求复用)."""

    def __init__(self, tz: ZoneInfo = UTC_TZ) -> None:
        self._tz = tz

    def format_entry(self, entry: LogEntry) -> DisplayRow:
        """格式化单行日志."""
        serialized = is_serialized_payload(entry.message)
        return DisplayRow(
            level=self.format_level(entry.level),
            date=escape(time_utils.format_unix(entry.time, TimeFormats.LOG_DATE_FORMAT, self._tz)),
            time=escape(time_utils.format_unix(entry.time, TimeFormats.LOG_TIME_FORMAT, self._tz)),
            message=Markup(SERIALIZED_PLACEHOLDER) if serialized else _text(entry.message),
            channel=_text(entry.channel),
            app=_text(entry.app),
            is_serialized=serialized,
        )

    @staticmethod
    def format_level(value: object) -> LevelBadge | None:
        """查表得到级别图标与文案,未知级别返回 None."""
        try:
            code = coerce_level(value)
        except MalformedLevel:
            return None
        display = LEVEL_DISPLAY.get(code)
        if display is None:
            return None
        return LevelBadge(code=code, icon=display.icon, label=display.label, css_class=display.css_class)
