"""Shared fixtures for Tripletex MCP server tests.

All HTTP traffic is mocked with the `responses` library; no test talks to
the real Tripletex API.
"""

import pytest
import responses

from tripletex_mcp.client.tripletex_client import TripletexClient

BASE_URL = "https://tripletex.test/v2"
SESSION_URL = f"{BASE_URL}/token/session/:create"
SESSION_TOKEN = "session-token-abc"


def add_session_response(token: str = SESSION_TOKEN, status: int = 200, body=None):
    """Register a mocked session token exchange."""
    if body is not None:
        responses.add(responses.POST, SESSION_URL, body=body, status=status)
    else:
        responses.add(
            responses.POST,
            SESSION_URL,
            json={"value": {"token": token}},
            status=status,
        )


def session_calls() -> list:
    """Recorded calls that went to the session token endpoint."""
    return [call for call in responses.calls if call.request.url == SESSION_URL]


@pytest.fixture
def client():
    """Tripletex client pointed at the mocked base URL."""
    tripletex = TripletexClient(
        base_url=BASE_URL,
        timeout=5,
        consumer_token="consumer-token",
        employee_token="employee-token",
        company_id="0",
    )
    yield tripletex
    tripletex.close()
