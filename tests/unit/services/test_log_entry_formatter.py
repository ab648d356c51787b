from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest
from markupsafe import Markup

from monolog_viewer.errors import MalformedLevel
from monolog_viewer.services.log_viewer.log_entry_formatter import LogEntryFormatter, coerce_level
from monolog_viewer.types.log_entries import LogEntry


def _entry(**overrides: object) -> LogEntry:
    values: dict[str, object] = {
        "level": 300,
        "time": 1700000000,
        "message": "Disk low",
        "channel": "cron",
        "app": "backup",
    }
    values.update(overrides)
    return LogEntry(**values)


@pytest.mark.unit
def test_format_entry_renders_warning_row() -> None:
    row = LogEntryFormatter().format_entry(_entry())

    assert row.level is not None
    assert row.level.icon == "⚠️"
    assert row.level.label == "Warning"
    assert row.level.css_class == "monolog-warning"
    assert row.level.code == 300
    assert row.date == "14.11.2023"
    assert row.time == "22:13:20"
    assert row.message == "Disk low"
    assert row.channel == "cron"
    assert row.app == "backup"
    assert row.is_serialized is False


@pytest.mark.unit
@pytest.mark.parametrize(
    ("level", "icon", "label"),
    [
        (100, "🐞", "Debug"),
        (200, "ℹ️", "Info"),
        (250, "🗒", "Notice"),
        (300, "⚠️", "Warning"),
        (400, "❌", "Error"),
        (500, "🔥", "Critical"),
        (550, "🛎", "Alert"),
        (600, "🚨", "Emergency"),
    ],
)
def test_format_level_maps_every_monolog_level(level: int, icon: str, label: str) -> None:
    badge = LogEntryFormatter.format_level(level)

    assert badge is not None
    assert (badge.icon, badge.label) == (icon, label)


@pytest.mark.unit
@pytest.mark.parametrize("level", [0, 150, 700, -100, None, True, 3.5, "abc", "", "300abc", "³", "--5", "+-1"])
def test_format_level_returns_none_for_unknown_or_malformed_values(level: object) -> None:
    assert LogEntryFormatter.format_level(level) is None


@pytest.mark.unit
def test_format_level_accepts_numeric_strings_from_driver() -> None:
    badge = LogEntryFormatter.format_level(" 400 ")

    assert badge is not None
    assert badge.label == "Error"


@pytest.mark.unit
@pytest.mark.parametrize("value", [False, "4.0", object(), None, "³", "--5"])
def test_coerce_level_rejects_non_integer_values(value: object) -> None:
    with pytest.raises(MalformedLevel):
        coerce_level(value)


@pytest.mark.unit
def test_format_entry_leaves_level_cell_empty_for_unknown_level() -> None:
    row = LogEntryFormatter().format_entry(_entry(level="not-a-level"))

    assert row.level is None
    assert row.message == "Disk low"


@pytest.mark.unit
def test_format_entry_uses_configured_timezone() -> None:
    row = LogEntryFormatter(ZoneInfo("Europe/Berlin")).format_entry(_entry())

    assert row.date == "14.11.2023"
    assert row.time == "23:13:20"


@pytest.mark.unit
@pytest.mark.parametrize("timestamp", [None, "yesterday", 10**20, True])
def test_format_entry_renders_placeholder_for_undecodable_time(timestamp: object) -> None:
    row = LogEntryFormatter().format_entry(_entry(time=timestamp))

    assert row.date == "-"
    assert row.time == "-"
    assert row.message == "Disk low"


@pytest.mark.unit
def test_format_entry_escapes_every_text_column() -> None:
    row = LogEntryFormatter().format_entry(
        _entry(
            message='<script>alert("x")</script>',
            channel="<b>cron</b>",
            app="a & b",
        ),
    )

    assert isinstance(row.message, Markup)
    assert str(row.message) == "&lt;script&gt;alert(&#34;x&#34;)&lt;/script&gt;"
    assert str(row.channel) == "&lt;b&gt;cron&lt;/b&gt;"
    assert str(row.app) == "a &amp; b"


@pytest.mark.unit
def test_format_entry_renders_none_text_as_empty() -> None:
    row = LogEntryFormatter().format_entry(_entry(message=None, channel=None, app=None))

    assert row.message == ""
    assert row.channel == ""
    assert row.app == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "message",
    [
        'a:1:{s:3:"foo";s:3:"bar";}',
        "b:0;",
        "i:42;",
        "N;",
        'O:8:"stdClass":1:{s:4:"name";s:3:"bob";}',
    ],
)
def test_format_entry_masks_serialized_payload(message: str) -> None:
    row = LogEntryFormatter().format_entry(_entry(message=message))

    assert row.message == "-- serialized data --"
    assert row.is_serialized is True


@pytest.mark.unit
@pytest.mark.parametrize("message", ["b:0; but then some text", 'a:1:{s:3:"foo";', "s:3:ab;"])
def test_format_entry_keeps_text_that_only_looks_serialized(message: str) -> None:
    row = LogEntryFormatter().format_entry(_entry(message=message))

    assert row.is_serialized is False
    assert row.message != "-- serialized data --"


@pytest.mark.unit
def test_format_entry_is_idempotent() -> None:
    formatter = LogEntryFormatter()
    entry = _entry(message="<i>same</i>")

    assert formatter.format_entry(entry) == formatter.format_entry(entry)


@pytest.mark.unit
def test_format_entry_renders_deeply_nested_payload_as_escaped_text() -> None:
    message = "a:1:{i:0;" * 5000
    row = LogEntryFormatter().format_entry(_entry(message=message))

    assert row.is_serialized is False
    assert row.message == message
    assert row.level is not None
