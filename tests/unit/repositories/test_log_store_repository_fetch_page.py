from __future__ import annotations

import pytest
from sqlalchemy import create_engine

from monolog_viewer.errors import StoreUnavailable
from monolog_viewer.repositories.log_store_repository import LogStoreRepository
from monolog_viewer.types.log_entries import LogEntry


@pytest.mark.unit
def test_fetch_page_returns_empty_result_for_empty_table(log_engine) -> None:
    repository = LogStoreRepository(log_engine, table_name="wp_log")

    rows, total = repository.fetch_page("time", "asc", 1, 100)

    assert rows == []
    assert total == 0


@pytest.mark.unit
def test_fetch_page_returns_last_partial_page(log_engine, insert_logs) -> None:
    """250 行 / 每页 100 / 第 3 页 => 50 行."""
    insert_logs([{"time": 1700000000 + index, "message": f"entry {index}"} for index in range(250)])
    repository = LogStoreRepository(log_engine, table_name="wp_log")

    rows, total = repository.fetch_page("time", "asc", 3, 100)

    assert total == 250
    assert len(rows) == 50
    assert rows[0].message == "entry 200"
    assert all(isinstance(row, LogEntry) for row in rows)


@pytest.mark.unit
def test_fetch_page_never_exceeds_per_page_and_covers_every_row(log_engine, insert_logs) -> None:
    insert_logs([{"time": index} for index in range(7)])
    repository = LogStoreRepository(log_engine, table_name="wp_log")

    seen: list[int] = []
    for page in range(1, 5):
        rows, total = repository.fetch_page("time", "asc", page, 2)
        assert total == 7
        assert len(rows) <= 2
        seen.extend(row.time for row in rows)

    assert seen == list(range(7))


@pytest.mark.unit
def test_fetch_page_orders_by_allowlisted_column(log_engine, insert_logs) -> None:
    insert_logs(
        [
            {"level": 300, "time": 3, "channel": "cron"},
            {"level": 100, "time": 1, "channel": "auth"},
            {"level": 600, "time": 2, "channel": "mail"},
        ],
    )
    repository = LogStoreRepository(log_engine, table_name="wp_log")

    rows, _ = repository.fetch_page("level", "desc", 1, 10)
    assert [row.level for row in rows] == [600, 300, 100]

    rows, _ = repository.fetch_page("channel", "asc", 1, 10)
    assert [row.channel for row in rows] == ["auth", "cron", "mail"]


@pytest.mark.unit
def test_fetch_page_falls_back_to_time_asc_for_unknown_parameters(log_engine, insert_logs) -> None:
    """非白名单排序参数不会进入 SQL,按 time asc 排序."""
    insert_logs([{"level": 100, "time": 30}, {"level": 600, "time": 10}, {"level": 300, "time": 20}])
    repository = LogStoreRepository(log_engine, table_name="wp_log")

    rows, total = repository.fetch_page("time; DROP TABLE wp_log", "sideways", 1, 10)

    assert [row.time for row in rows] == [10, 20, 30]
    # 表仍然存在
    assert repository.fetch_page("time", "asc", 1, 10)[1] == total == 3


@pytest.mark.unit
def test_fetch_page_clamps_page_and_per_page(log_engine, insert_logs) -> None:
    insert_logs([{"time": index} for index in range(505)])
    repository = LogStoreRepository(log_engine, table_name="wp_log")

    rows, _ = repository.fetch_page("time", "asc", 0, 10_000)
    assert len(rows) == 500
    assert rows[0].time == 0

    rows, _ = repository.fetch_page("time", "asc", -4, 0)
    assert [row.time for row in rows] == [0]


@pytest.mark.unit
def test_fetch_page_raises_store_unavailable_when_table_missing(log_engine) -> None:
    repository = LogStoreRepository(log_engine, table_name="wp_missing_log")

    with pytest.raises(StoreUnavailable) as exc_info:
        repository.fetch_page("time", "asc", 1, 100)

    assert exc_info.value.status_code == 503
    assert exc_info.value.extra == {"table": "wp_missing_log"}


@pytest.mark.unit
def test_fetch_page_raises_store_unavailable_when_connection_fails(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nested' / 'log.db'}")
    repository = LogStoreRepository(engine, table_name="wp_log")

    with pytest.raises(StoreUnavailable):
        repository.fetch_page("time", "asc", 1, 100)
