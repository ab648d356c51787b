from __future__ import annotations

import pytest

from monolog_viewer.types.log_table import ListTable
from monolog_viewer.views.log_list_table import LogListTable


@pytest.mark.unit
def test_get_columns_is_ordered() -> None:
    assert LogListTable().get_columns() == {
        "level": "Log Level",
        "time": "Date / Time",
        "message": "Message",
        "channel": "Channel",
        "app": "App",
    }


@pytest.mark.unit
def test_get_sortable_columns_sort_descending_on_first_click() -> None:
    sortable = LogListTable().get_sortable_columns()

    assert set(sortable) == {"level", "time", "message", "channel", "app"}
    assert sortable["message"] == ("message", True)


@pytest.mark.unit
def test_render_requires_prepared_page() -> None:
    with pytest.raises(RuntimeError, match="prepare_page"):
        LogListTable().render()


@pytest.mark.unit
def test_log_list_table_satisfies_list_table_interface() -> None:
    table: ListTable = LogListTable()

    for name in ("get_columns", "get_sortable_columns", "prepare_page", "render"):
        assert callable(getattr(table, name))
