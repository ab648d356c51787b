import pytest


@pytest.mark.integration
def test_logs_api_reads_configured_table(client) -> None:
    response = client.get("/logs/api/entries?per_page=5&orderby=time&order=desc")
    payload = response.get_json()

    assert response.status_code == 200
    assert payload["success"] is True
    data = payload["data"]
    assert data["store_available"] is True
    assert len(data["rows"]) <= 5
    assert data["pagination"]["per_page"] == 5


@pytest.mark.integration
def test_logs_page_renders_against_real_table(client) -> None:
    response = client.get("/logs/")

    assert response.status_code == 200
    assert "Log Level" in response.get_data(as_text=True)
