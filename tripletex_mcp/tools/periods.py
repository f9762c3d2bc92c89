"""
Timesheet Week & Month Tools

Provides 8 MCP tools for the period approval workflow:
- search_timesheet_weeks, approve/complete/reopen_timesheet_week
- get_timesheet_month, approve/complete/reopen_timesheet_month

Weeks are ISO week-years ("2026-07"), months are "2026-02".
"""

from ..server import mcp
from .base import READ_ONLY, run_tool

# ============================================================================
# Weeks
# ============================================================================


@mcp.tool(annotations=READ_ONLY)
async def search_timesheet_weeks(
    employee_ids: str | None = None,
    week_year: str | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Search weekly timesheet status.

    Args:
        employee_ids: Employee ID(s), comma-separated
        week_year: ISO week-year (e.g. '2026-07')
        offset: Pagination offset
        count: Number of results
    """
    return await run_tool(
        "search_timesheet_weeks",
        employee_ids=employee_ids,
        week_year=week_year,
        offset=offset,
        count=count,
    )


@mcp.tool()
async def approve_timesheet_week(
    id: int | None = None,
    employee_id: int | None = None,
    week_year: str | None = None,
) -> dict:
    """
    Approve a timesheet week.

    Identify the week either by id or by employee_id + week_year.

    Args:
        id: Timesheet week ID
        employee_id: Employee ID
        week_year: ISO week-year (e.g. '2026-07')
    """
    return await run_tool(
        "approve_timesheet_week", id=id, employee_id=employee_id, week_year=week_year
    )


@mcp.tool()
async def complete_timesheet_week(
    id: int | None = None,
    employee_id: int | None = None,
    week_year: str | None = None,
) -> dict:
    """
    Mark a timesheet week as complete.

    Args:
        id: Timesheet week ID
        employee_id: Employee ID
        week_year: ISO week-year (e.g. '2026-07')
    """
    return await run_tool(
        "complete_timesheet_week", id=id, employee_id=employee_id, week_year=week_year
    )


@mcp.tool()
async def reopen_timesheet_week(
    id: int | None = None,
    employee_id: int | None = None,
    week_year: str | None = None,
) -> dict:
    """
    Reopen a completed/approved timesheet week.

    Args:
        id: Timesheet week ID
        employee_id: Employee ID
        week_year: ISO week-year (e.g. '2026-07')
    """
    return await run_tool(
        "reopen_timesheet_week", id=id, employee_id=employee_id, week_year=week_year
    )


# ============================================================================
# Months
# ============================================================================


@mcp.tool(annotations=READ_ONLY)
async def get_timesheet_month(employee_ids: str, month_year: str) -> dict:
    """
    Get monthly timesheet status for employees.

    Args:
        employee_ids: Employee ID(s), comma-separated
        month_year: Month (e.g. '2026-02')
    """
    return await run_tool(
        "get_timesheet_month", employee_ids=employee_ids, month_year=month_year
    )


@mcp.tool()
async def approve_timesheet_month(
    id: int | None = None,
    employee_ids: str | None = None,
    month_year: str | None = None,
) -> dict:
    """
    Approve a timesheet month.

    Args:
        id: Timesheet month ID
        employee_ids: Employee ID(s), comma-separated
        month_year: Month (e.g. '2026-02')
    """
    return await run_tool(
        "approve_timesheet_month", id=id, employee_ids=employee_ids, month_year=month_year
    )


@mcp.tool()
async def complete_timesheet_month(
    id: int | None = None,
    employee_ids: str | None = None,
    month_year: str | None = None,
) -> dict:
    """
    Mark a timesheet month as complete.

    Args:
        id: Timesheet month ID
        employee_ids: Employee ID(s), comma-separated
        month_year: Month (e.g. '2026-02')
    """
    return await run_tool(
        "complete_timesheet_month", id=id, employee_ids=employee_ids, month_year=month_year
    )


@mcp.tool()
async def reopen_timesheet_month(
    id: int | None = None,
    employee_ids: str | None = None,
    month_year: str | None = None,
) -> dict:
    """
    Reopen a completed/approved timesheet month.

    Args:
        id: Timesheet month ID
        employee_ids: Employee ID(s), comma-separated
        month_year: Month (e.g. '2026-02')
    """
    return await run_tool(
        "reopen_timesheet_month", id=id, employee_ids=employee_ids, month_year=month_year
    )
