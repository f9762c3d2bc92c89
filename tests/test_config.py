"""Tests for configuration validation, summaries and input validators."""

import pytest

from tripletex_mcp.client.errors import UpstreamError
from tripletex_mcp.config import TripletexServerConfig, config
from tripletex_mcp.utils.formatters import format_error_response
from tripletex_mcp.utils.validators import (
    ValidationError,
    validate_date_string,
    validate_id,
    validate_id_list,
    validate_month_year,
    validate_week_year,
)

# ============================================================================
# CONFIG
# ============================================================================


@pytest.fixture
def valid_config(monkeypatch):
    monkeypatch.setattr(TripletexServerConfig, "API_URL", "https://tripletex.no/v2")
    monkeypatch.setattr(TripletexServerConfig, "API_TIMEOUT", 30)
    monkeypatch.setattr(TripletexServerConfig, "COMPANY_ID", "0")
    monkeypatch.setattr(TripletexServerConfig, "LOG_LEVEL", "INFO")
    return monkeypatch


def test_default_config_is_valid(valid_config):
    assert config.validate() == (True, None)


@pytest.mark.parametrize(
    "attribute,value,message",
    [
        ("API_URL", "tripletex.no/v2", "must start with http"),
        ("API_URL", "", "TRIPLETEX_API_URL is required"),
        ("API_TIMEOUT", 0, "TRIPLETEX_API_TIMEOUT must be positive"),
        ("COMPANY_ID", "acme", "TRIPLETEX_COMPANY_ID"),
        ("LOG_LEVEL", "VERBOSE", "LOG_LEVEL must be one of"),
    ],
)
def test_invalid_config(valid_config, attribute, value, message):
    valid_config.setattr(TripletexServerConfig, attribute, value)

    is_valid, error = config.validate()

    assert not is_valid
    assert message in error


def test_summary_masks_tokens(monkeypatch):
    monkeypatch.setattr(TripletexServerConfig, "CONSUMER_TOKEN", "consumer-secret-1234")
    monkeypatch.setattr(TripletexServerConfig, "EMPLOYEE_TOKEN", None)

    summary = config.get_summary()

    assert summary["consumer_token"] == "***1234"
    assert summary["employee_token"] is None
    assert "consumer-secret" not in str(summary)
    assert not config.has_credentials()


# ============================================================================
# VALIDATORS
# ============================================================================


def test_validators_accept_none():
    validate_date_string(None)
    validate_id(None)
    validate_id_list(None)
    validate_week_year(None)
    validate_month_year(None)


@pytest.mark.parametrize("value", ["2026-02-30", "2026/02/01", "tomorrow"])
def test_invalid_dates(value):
    with pytest.raises(ValidationError):
        validate_date_string(value, "date_from")


@pytest.mark.parametrize("value", [0, -5, True])
def test_invalid_ids(value):
    with pytest.raises(ValidationError):
        validate_id(value)


def test_id_lists():
    validate_id_list("12")
    validate_id_list("12,34, 56")
    with pytest.raises(ValidationError):
        validate_id_list("12;34")


def test_periods():
    validate_week_year("2026-07")
    validate_month_year("2026-12")
    with pytest.raises(ValidationError):
        validate_week_year("2026-7")
    with pytest.raises(ValidationError):
        validate_month_year("2026-13")


# ============================================================================
# FORMATTERS
# ============================================================================


def test_format_error_response_for_upstream_error():
    error = UpstreamError(409, "Conflict", path="/timesheet/entry/1")

    response = format_error_response(error, {"tool": "update_timesheet_entry"})

    assert response["success"] is False
    assert response["error"] == "api_error"
    assert response["message"] == "Tripletex API 409: Conflict"
    assert response["status_code"] == 409
    assert response["body"] == "Conflict"
    assert response["endpoint"] == "/timesheet/entry/1"
    assert response["context"] == {"tool": "update_timesheet_entry"}
    assert "timestamp" in response


def test_format_error_response_for_plain_exception():
    response = format_error_response(RuntimeError("boom"))

    assert response["error"] == "RuntimeError"
    assert response["message"] == "boom"
