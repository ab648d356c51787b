"""Monolog 日志级别常量.

级别取值与 Monolog 保持一致(RFC 5424 的八级约定),
展示层通过 `LEVEL_DISPLAY` 查表得到图标与文案.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType


class MonologLevel(IntEnum):
    """Monolog 日志级别."""

    DEBUG = 100
    INFO = 200
    NOTICE = 250
    WARNING = 300
    ERROR = 400
    CRITICAL = 500
    ALERT = 550
    EMERGENCY = 600


@dataclass(frozen=True, slots=True)
class LevelDisplay:
    """单个级别的展示元数据."""

    icon: str
    label: str
    css_class: str


LEVEL_DISPLAY: MappingProxyType[int, LevelDisplay] = MappingProxyType(
    {
        MonologLevel.DEBUG: LevelDisplay(icon="🐞", label="Debug", css_class="monolog-debug"),
        MonologLevel.INFO: LevelDisplay(icon="ℹ️", label="Info", css_class="monolog-info"),
        MonologLevel.NOTICE: LevelDisplay(icon="🗒", label="Notice", css_class="monolog-notice"),
        MonologLevel.WARNING: LevelDisplay(icon="⚠️", label="Warning", css_class="monolog-warning"),
        MonologLevel.ERROR: LevelDisplay(icon="❌", label="Error", css_class="monolog-error"),
        MonologLevel.CRITICAL: LevelDisplay(icon="🔥", label="Critical", css_class="monolog-critical"),
        MonologLevel.ALERT: LevelDisplay(icon="🛎", label="Alert", css_class="monolog-alert"),
        MonologLevel.EMERGENCY: LevelDisplay(icon="🚨", label="Emergency", css_class="monolog-emergency"),
    },
)
