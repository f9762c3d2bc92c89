"""End-to-end tests for MCP tool functions.

Tool functions are called directly (the FastMCP decorator returns them
unchanged) against a client whose HTTP traffic is mocked.
"""

import asyncio
from urllib.parse import parse_qsl, urlsplit

import pytest
import responses

from tripletex_mcp import server
from tripletex_mcp.tools import invoices, periods, projects, timesheet

from .conftest import BASE_URL, add_session_response, session_calls


@pytest.fixture(autouse=True)
def use_test_client(client, monkeypatch):
    """Route every tool through the fixture client."""
    monkeypatch.setattr(server, "tripletex_client", client)


@responses.activate
def test_search_projects_returns_upstream_json():
    add_session_response()
    payload = {"fullResultSize": 1, "values": [{"id": 1, "name": "Acme AS"}]}
    responses.add(responses.GET, f"{BASE_URL}/project", json=payload)

    result = asyncio.run(projects.search_projects(name="Acme", offset=0, count=10))

    assert result == payload
    url = urlsplit(responses.calls[-1].request.url)
    assert url.path == "/v2/project"
    assert dict(parse_qsl(url.query)) == {"name": "Acme", "from": "0", "count": "10"}


@responses.activate
def test_tools_share_one_session():
    add_session_response()
    responses.add(responses.GET, f"{BASE_URL}/token/session/%3EwhoAmI", json={"value": {}})
    responses.add(responses.GET, f"{BASE_URL}/timesheet/timeClock/present", json={"value": {}})

    asyncio.run(projects.whoami())
    asyncio.run(timesheet.get_current_time_clock())

    assert len(session_calls()) == 1


@responses.activate
def test_delete_tool_returns_confirmation():
    add_session_response()
    responses.add(responses.DELETE, f"{BASE_URL}/timesheet/entry/42", status=204, body="")

    result = asyncio.run(timesheet.delete_timesheet_entry(id=42, version=3))

    assert result == {"success": True, "message": "Timesheet entry 42 deleted."}


@responses.activate
def test_upstream_error_returned_as_dict():
    """Tool calls do not raise; the error dict carries status and body."""
    add_session_response()
    responses.add(
        responses.GET,
        f"{BASE_URL}/invoice/999",
        body='{"status":404,"message":"Object not found"}',
        status=404,
    )

    result = asyncio.run(invoices.get_invoice(id=999))

    assert result["success"] is False
    assert result["error"] == "api_error"
    assert result["status_code"] == 404
    assert result["body"] == '{"status":404,"message":"Object not found"}'
    assert result["context"] == {"tool": "get_invoice"}


@responses.activate
def test_authentication_error_returned_as_dict():
    add_session_response(status=401, body="Invalid employee token")

    result = asyncio.run(periods.search_timesheet_weeks(week_year="2026-07"))

    assert result["error"] == "authentication_error"
    assert result["status_code"] == 401
    assert "Invalid employee token" in result["message"]


@responses.activate
def test_validation_error_makes_no_request():
    result = asyncio.run(
        invoices.search_supplier_invoices(
            invoice_date_from="2026-13-01", invoice_date_to="2026-02-01"
        )
    )

    assert result["error"] == "validation_error"
    assert result["field"] == "invoice_date_from"
    assert len(responses.calls) == 0


@responses.activate
def test_configuration_error_returned_as_dict(monkeypatch):
    from tripletex_mcp.client.tripletex_client import TripletexClient
    from tripletex_mcp.config import TripletexServerConfig

    monkeypatch.setattr(TripletexServerConfig, "CONSUMER_TOKEN", None)
    monkeypatch.setattr(TripletexServerConfig, "EMPLOYEE_TOKEN", None)
    monkeypatch.setattr(server, "tripletex_client", TripletexClient(base_url=BASE_URL))

    result = asyncio.run(projects.whoami())

    assert result["error"] == "configuration_error"
    assert len(responses.calls) == 0


@responses.activate
def test_create_timesheet_entry_posts_body():
    add_session_response()
    responses.add(
        responses.POST,
        f"{BASE_URL}/timesheet/entry",
        json={"value": {"id": 501, "hours": 7.5}},
        status=201,
    )

    result = asyncio.run(
        timesheet.create_timesheet_entry(
            employee_id=1, project_id=10, activity_id=5, date="2026-02-02", hours=7.5
        )
    )

    assert result == {"value": {"id": 501, "hours": 7.5}}
    assert "comment" not in responses.calls[-1].request.body


@responses.activate
def test_approve_supplier_invoices_sends_ids_and_comment():
    add_session_response()
    responses.add(responses.PUT, f"{BASE_URL}/supplierInvoice/:approve", json={"values": []})

    asyncio.run(invoices.approve_supplier_invoices(invoice_ids="11,12", comment="OK"))

    assert responses.calls[-1].request.url == (
        f"{BASE_URL}/supplierInvoice/:approve?invoiceIds=11%2C12&comment=OK"
    )


@responses.activate
def test_search_activities_passes_name_filter():
    """A tool argument called 'name' reaches the query string."""
    add_session_response()
    responses.add(responses.GET, f"{BASE_URL}/activity", json={"values": []})

    result = asyncio.run(projects.search_activities(name="Meeting", is_general=True))

    assert result == {"values": []}
    query = dict(parse_qsl(urlsplit(responses.calls[-1].request.url).query))
    assert query == {"name": "Meeting", "isGeneral": "true"}


@responses.activate
def test_search_projects_without_filters():
    add_session_response()
    responses.add(responses.GET, f"{BASE_URL}/project", json={"values": []})

    result = asyncio.run(projects.search_projects())

    assert result == {"values": []}
    assert responses.calls[-1].request.url == f"{BASE_URL}/project"
