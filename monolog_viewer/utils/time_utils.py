"""统一时间处理工具模块.

基于 zoneinfo 模块,将日志表中的 Unix 时间戳转换为固定时区的展示文本.
"""

from __future__ import annotations

from datetime import UTC, datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from monolog_viewer.constants import TIME_PLACEHOLDER
from monolog_viewer.utils.structlog_config import log_warning

UTC_TZ = ZoneInfo("UTC")


class TimeFormats:
    """时间格式常量."""

    LOG_DATE_FORMAT = "%d.%m.%Y"
    LOG_TIME_FORMAT = "%H:%M:%S"
    DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@lru_cache(maxsize=32)
def resolve_timezone(name: str | None) -> ZoneInfo:
    """按名称获取时区,空值回退 UTC.

    Settings 已在启动时校验过时区名称,这里不再兜底非法值.
    """
    if not name:
        return UTC_TZ
    return ZoneInfo(name)


class TimeUtils:
    """统一时间处理工具类."""

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间."""
        return datetime.now(UTC)

    @staticmethod
    def from_unix(timestamp: object, tz: ZoneInfo = UTC_TZ) -> datetime | None:
        """将 Unix 时间戳(秒)转换为指定时区的 datetime.

        Args:
            timestamp: 时间戳,支持 int/float 以及纯数字字符串.
            tz: 目标时区,默认 UTC.

        Returns:
            转换后的时间,无法解析时返回 None.

        """
        if timestamp is None or isinstance(timestamp, bool):
            return None

        try:
            if isinstance(timestamp, str):
                stripped = timestamp.strip()
                seconds: float = int(stripped, 10) if stripped.lstrip("-").isdigit() else float(stripped)
            else:
                seconds = float(timestamp)  # type: ignore[arg-type]
            return datetime.fromtimestamp(seconds, tz=tz)
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            log_warning("时间戳转换失败", module="time_utils", exception=exc, raw_timestamp=repr(timestamp))
            return None

    @staticmethod
    def format_unix(
        timestamp: object,
        format_str: str = TimeFormats.DATETIME_FORMAT,
        tz: ZoneInfo = UTC_TZ,
    ) -> str:
        """格式化 Unix 时间戳.

        Returns:
            格式化后的字符串,失败时返回 '-'.

        """
        converted = TimeUtils.from_unix(timestamp, tz)
        if converted is None:
            return TIME_PLACEHOLDER
        return converted.strftime(format_str)


time_utils = TimeUtils()
