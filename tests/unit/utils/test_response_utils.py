from __future__ import annotations

import pytest

from monolog_viewer.constants.system_constants import ErrorCategory, ErrorMessages
from monolog_viewer.errors import StoreUnavailable
from monolog_viewer.utils.response_utils import unified_error_response, unified_success_response


@pytest.mark.unit
def test_unified_success_response_envelope() -> None:
    payload, status = unified_success_response(data={"rows": []}, message="ok")

    assert status == 200
    assert payload["success"] is True
    assert payload["error"] is False
    assert payload["message"] == "ok"
    assert payload["data"] == {"rows": []}
    assert "timestamp" in payload
    assert set(payload) == {"success", "error", "message", "timestamp", "data"}


@pytest.mark.unit
def test_unified_error_response_for_app_error() -> None:
    payload, status = unified_error_response(StoreUnavailable())

    assert status == 503
    assert payload["success"] is False
    assert payload["message_code"] == "LOG_STORE_UNAVAILABLE"
    assert payload["category"] == "database"


@pytest.mark.unit
def test_unified_error_response_hides_unexpected_error_message() -> None:
    payload, status = unified_error_response(RuntimeError("dsn=mysql://root:secret@db"))

    assert status == 500
    assert payload["message"] == ErrorMessages.INTERNAL_ERROR
    assert "secret" not in str(payload)


@pytest.mark.unit
def test_error_categories_cover_raised_errors_only() -> None:
    assert {category.value for category in ErrorCategory} == {"validation", "database", "system"}
