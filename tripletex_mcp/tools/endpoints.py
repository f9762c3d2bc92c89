"""
Endpoint Table

Every MCP tool is one Tripletex request. This module describes each request as
data: HTTP method, path template, which tool arguments go to the query string
(and under which upstream name), how the JSON body is built, and which
validators run first. call_endpoint() is the only code that turns a record and
a set of tool arguments into a dispatcher call.

Path templates use tool argument names as placeholders. Tripletex's own
":action" and ">subResource" segments are literal text.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..utils.formatters import format_message_response
from ..utils.validators import (
    validate_count,
    validate_date_string,
    validate_hours,
    validate_id,
    validate_id_list,
    validate_month_year,
    validate_offset,
    validate_week_year,
)


def to_upstream_name(arg: str) -> str:
    """
    Convert a snake_case tool argument to the Tripletex camelCase field.

    Example:
        >>> to_upstream_name("employee_in_project_id")
        'employeeInProjectId'
    """
    head, *rest = arg.split("_")
    return head + "".join(part.capitalize() for part in rest)


def query_fields(*args: str, **renamed: str) -> dict[str, str]:
    """Map tool arguments to query keys; keyword arguments override the name."""
    mapping = {arg: to_upstream_name(arg) for arg in args}
    mapping.update(renamed)
    return mapping


PAGINATION = query_fields("count", offset="from")
PAGINATION_CHECKS = {"offset": validate_offset, "count": validate_count}


@dataclass(frozen=True)
class Endpoint:
    """One Tripletex request reachable from a tool."""

    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=dict)
    body: Callable[[Mapping[str, Any]], Any] | None = None
    checks: Mapping[str, Callable[[Any, str], None]] = field(default_factory=dict)
    message: str | None = None
    destructive: bool = False

    def render_path(self, args: Mapping[str, Any]) -> str:
        return self.path.format(**args)

    def build_query(self, args: Mapping[str, Any]) -> dict[str, Any]:
        return {upstream: args.get(arg) for arg, upstream in self.query.items()}

    def build_body(self, args: Mapping[str, Any]) -> Any:
        return self.body(args) if self.body else None


def _timesheet_entry_body(args: Mapping[str, Any]) -> dict:
    body = {
        "employee": {"id": args["employee_id"]},
        "project": {"id": args["project_id"]},
        "activity": {"id": args["activity_id"]},
        "date": args["date"],
        "hours": args["hours"],
        "comment": args.get("comment"),
    }
    return {key: value for key, value in body.items() if value is not None}


def _timesheet_entry_update_body(args: Mapping[str, Any]) -> dict:
    return {"id": args["id"], "version": args["version"], **_timesheet_entry_body(args)}


_ENTRY_CHECKS = {
    "employee_id": validate_id,
    "project_id": validate_id,
    "activity_id": validate_id,
    "date": validate_date_string,
    "hours": validate_hours,
}

_PERIOD_WEEK = query_fields("id", "employee_id", "week_year")
_PERIOD_WEEK_CHECKS = {
    "id": validate_id,
    "employee_id": validate_id,
    "week_year": validate_week_year,
}
_PERIOD_MONTH = query_fields("id", "employee_ids", "month_year")
_PERIOD_MONTH_CHECKS = {
    "id": validate_id,
    "employee_ids": validate_id_list,
    "month_year": validate_month_year,
}
_INVOICE_DATES = {
    "invoice_date_from": validate_date_string,
    "invoice_date_to": validate_date_string,
}


ENDPOINTS: dict[str, Endpoint] = {
    # Authentication
    "whoami": Endpoint("GET", "/token/session/>whoAmI"),
    # Projects & activities
    "search_projects": Endpoint(
        "GET",
        "/project",
        query={
            **query_fields(
                "name", "number", "employee_in_project_id", "project_manager_id", "is_closed"
            ),
            **PAGINATION,
        },
        checks={
            "employee_in_project_id": validate_id_list,
            "project_manager_id": validate_id_list,
            **PAGINATION_CHECKS,
        },
    ),
    "search_activities": Endpoint(
        "GET",
        "/activity",
        query={
            **query_fields(
                "name", "number", "is_project_activity", "is_general", "is_inactive"
            ),
            **PAGINATION,
        },
        checks=PAGINATION_CHECKS,
    ),
    # Timesheet entries
    "search_timesheet_entries": Endpoint(
        "GET",
        "/timesheet/entry",
        query={
            **query_fields(
                "date_from", "date_to", "employee_id", "project_id", "activity_id", "comment"
            ),
            **PAGINATION,
        },
        checks={
            "date_from": validate_date_string,
            "date_to": validate_date_string,
            "employee_id": validate_id_list,
            "project_id": validate_id_list,
            "activity_id": validate_id_list,
            **PAGINATION_CHECKS,
        },
    ),
    "get_timesheet_entry": Endpoint(
        "GET", "/timesheet/entry/{id}", checks={"id": validate_id}
    ),
    "create_timesheet_entry": Endpoint(
        "POST", "/timesheet/entry", body=_timesheet_entry_body, checks=_ENTRY_CHECKS
    ),
    "update_timesheet_entry": Endpoint(
        "PUT",
        "/timesheet/entry/{id}",
        body=_timesheet_entry_update_body,
        checks={"id": validate_id, **_ENTRY_CHECKS},
    ),
    "delete_timesheet_entry": Endpoint(
        "DELETE",
        "/timesheet/entry/{id}",
        query=query_fields("version"),
        checks={"id": validate_id},
        message="Timesheet entry {id} deleted.",
        destructive=True,
    ),
    "get_total_hours": Endpoint(
        "GET",
        "/timesheet/entry/>totalHours",
        query=query_fields("employee_id", "start_date", "end_date"),
        checks={
            "employee_id": validate_id,
            "start_date": validate_date_string,
            "end_date": validate_date_string,
        },
    ),
    "get_recent_projects": Endpoint(
        "GET",
        "/timesheet/entry/>recentProjects",
        query=query_fields("employee_id"),
        checks={"employee_id": validate_id},
    ),
    "get_recent_activities": Endpoint(
        "GET",
        "/timesheet/entry/>recentActivities",
        query=query_fields("project_id", "employee_id"),
        checks={"project_id": validate_id, "employee_id": validate_id},
    ),
    # Time clock
    "start_time_clock": Endpoint(
        "PUT",
        "/timesheet/timeClock/:start",
        query=query_fields("activity_id", "project_id", "employee_id", "date", "comment"),
        checks={
            "activity_id": validate_id,
            "project_id": validate_id,
            "employee_id": validate_id,
            "date": validate_date_string,
        },
    ),
    "stop_time_clock": Endpoint(
        "PUT",
        "/timesheet/timeClock/{id}/:stop",
        query=query_fields("comment"),
        checks={"id": validate_id},
    ),
    "get_current_time_clock": Endpoint(
        "GET",
        "/timesheet/timeClock/present",
        query=query_fields("employee_id"),
        checks={"employee_id": validate_id},
    ),
    # Timesheet weeks
    "search_timesheet_weeks": Endpoint(
        "GET",
        "/timesheet/week",
        query={**query_fields("employee_ids", "week_year"), **PAGINATION},
        checks={
            "employee_ids": validate_id_list,
            "week_year": validate_week_year,
            **PAGINATION_CHECKS,
        },
    ),
    "approve_timesheet_week": Endpoint(
        "PUT", "/timesheet/week/:approve", query=_PERIOD_WEEK, checks=_PERIOD_WEEK_CHECKS
    ),
    "complete_timesheet_week": Endpoint(
        "PUT", "/timesheet/week/:complete", query=_PERIOD_WEEK, checks=_PERIOD_WEEK_CHECKS
    ),
    "reopen_timesheet_week": Endpoint(
        "PUT", "/timesheet/week/:reopen", query=_PERIOD_WEEK, checks=_PERIOD_WEEK_CHECKS
    ),
    # Timesheet months
    "get_timesheet_month": Endpoint(
        "GET",
        "/timesheet/month/byMonthNumberList",
        query=query_fields("employee_ids", month_year="monthYearList"),
        checks={"employee_ids": validate_id_list, "month_year": validate_month_year},
    ),
    "approve_timesheet_month": Endpoint(
        "PUT", "/timesheet/month/:approve", query=_PERIOD_MONTH, checks=_PERIOD_MONTH_CHECKS
    ),
    "complete_timesheet_month": Endpoint(
        "PUT", "/timesheet/month/:complete", query=_PERIOD_MONTH, checks=_PERIOD_MONTH_CHECKS
    ),
    "reopen_timesheet_month": Endpoint(
        "PUT", "/timesheet/month/:reopen", query=_PERIOD_MONTH, checks=_PERIOD_MONTH_CHECKS
    ),
    # Outgoing invoices
    "search_invoices": Endpoint(
        "GET",
        "/invoice",
        query={
            **query_fields("invoice_date_from", "invoice_date_to", "invoice_number", "customer_id"),
            **PAGINATION,
        },
        checks={**_INVOICE_DATES, **PAGINATION_CHECKS},
    ),
    "get_invoice": Endpoint("GET", "/invoice/{id}", checks={"id": validate_id}),
    # Supplier invoices
    "search_supplier_invoices": Endpoint(
        "GET",
        "/supplierInvoice",
        query={
            **query_fields("invoice_date_from", "invoice_date_to", "invoice_number", "supplier_id"),
            **PAGINATION,
        },
        checks={**_INVOICE_DATES, **PAGINATION_CHECKS},
    ),
    "get_supplier_invoice": Endpoint(
        "GET", "/supplierInvoice/{id}", checks={"id": validate_id}
    ),
    "get_supplier_invoices_for_approval": Endpoint(
        "GET",
        "/supplierInvoice/forApproval",
        query={**query_fields("search_text", "show_all", "employee_id"), **PAGINATION},
        checks={"employee_id": validate_id, **PAGINATION_CHECKS},
    ),
    "approve_supplier_invoice": Endpoint(
        "PUT",
        "/supplierInvoice/{invoice_id}/:approve",
        query=query_fields("comment"),
        checks={"invoice_id": validate_id},
    ),
    "approve_supplier_invoices": Endpoint(
        "PUT",
        "/supplierInvoice/:approve",
        query=query_fields("invoice_ids", "comment"),
        checks={"invoice_ids": validate_id_list},
    ),
    "reject_supplier_invoice": Endpoint(
        "PUT",
        "/supplierInvoice/{invoice_id}/:reject",
        query=query_fields("comment"),
        checks={"invoice_id": validate_id},
        destructive=True,
    ),
    "reject_supplier_invoices": Endpoint(
        "PUT",
        "/supplierInvoice/:reject",
        query=query_fields("invoice_ids", "comment"),
        checks={"invoice_ids": validate_id_list},
        destructive=True,
    ),
}


async def call_endpoint(client, endpoint: Endpoint, args: Mapping[str, Any]) -> Any:
    """
    Validate tool arguments and perform the endpoint's request.

    Args:
        client: TripletexClient (anything with an async execute())
        endpoint: Endpoint record
        args: Tool arguments by their Python names

    Returns:
        Tripletex JSON unchanged, or a message response for endpoints
        without a meaningful payload

    Raises:
        ValidationError: An argument failed its check
        TripletexError: The request failed
    """
    for name, check in endpoint.checks.items():
        check(args.get(name), name)

    query = endpoint.build_query(args)
    result = await client.execute(
        endpoint.method,
        endpoint.render_path(args),
        query=query or None,
        body=endpoint.build_body(args),
    )

    if endpoint.message:
        return format_message_response(endpoint.message.format(**args))
    return result
