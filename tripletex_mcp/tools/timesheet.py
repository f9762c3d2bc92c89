"""
Timesheet Entry & Time Clock Tools

Provides 11 MCP tools for logging hours:
1. search_timesheet_entries - Hours logged in a date range
2. get_timesheet_entry - One entry by ID
3. create_timesheet_entry - Log hours
4. update_timesheet_entry - Change an entry (optimistic locking via version)
5. delete_timesheet_entry - Remove an entry
6. get_total_hours - Hour total for an employee
7. get_recent_projects - Recently used projects
8. get_recent_activities - Recently used activities for a project
9. start_time_clock / 10. stop_time_clock / 11. get_current_time_clock

Tripletex allows one entry per employee/date/activity/project combination;
a duplicate create comes back as an api_error with the upstream message.
"""

from ..server import mcp
from .base import DESTRUCTIVE, READ_ONLY, run_tool

# ============================================================================
# Timesheet entries
# ============================================================================


@mcp.tool(annotations=READ_ONLY)
async def search_timesheet_entries(
    date_from: str,
    date_to: str,
    employee_id: str | None = None,
    project_id: str | None = None,
    activity_id: str | None = None,
    comment: str | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Search timesheet entries for a date range. Returns hours logged by employees.

    Args:
        date_from: From date inclusive (yyyy-MM-dd)
        date_to: To date exclusive (yyyy-MM-dd)
        employee_id: Filter by employee ID(s), comma-separated
        project_id: Filter by project ID(s), comma-separated
        activity_id: Filter by activity ID(s), comma-separated
        comment: Filter by comment text
        offset: Pagination offset (default 0)
        count: Number of results (default 1000)
    """
    return await run_tool(
        "search_timesheet_entries",
        date_from=date_from,
        date_to=date_to,
        employee_id=employee_id,
        project_id=project_id,
        activity_id=activity_id,
        comment=comment,
        offset=offset,
        count=count,
    )


@mcp.tool(annotations=READ_ONLY)
async def get_timesheet_entry(id: int) -> dict:
    """
    Get a single timesheet entry by ID.

    Args:
        id: Timesheet entry ID
    """
    return await run_tool("get_timesheet_entry", id=id)


@mcp.tool()
async def create_timesheet_entry(
    employee_id: int,
    project_id: int,
    activity_id: int,
    date: str,
    hours: float,
    comment: str | None = None,
) -> dict:
    """
    Create a new timesheet entry (log hours).

    Only one entry per employee/date/activity/project combo.

    Args:
        employee_id: Employee ID
        project_id: Project ID
        activity_id: Activity ID
        date: Date (yyyy-MM-dd)
        hours: Number of hours
        comment: Optional comment

    Example:
        create_timesheet_entry(employee_id=1, project_id=10, activity_id=5,
                               date="2026-02-02", hours=7.5)
    """
    return await run_tool(
        "create_timesheet_entry",
        employee_id=employee_id,
        project_id=project_id,
        activity_id=activity_id,
        date=date,
        hours=hours,
        comment=comment,
    )


@mcp.tool()
async def update_timesheet_entry(
    id: int,
    version: int,
    employee_id: int,
    project_id: int,
    activity_id: int,
    date: str,
    hours: float,
    comment: str | None = None,
) -> dict:
    """
    Update an existing timesheet entry. Fields not set will be nulled.

    Args:
        id: Timesheet entry ID
        version: Current version number (for optimistic locking)
        employee_id: Employee ID
        project_id: Project ID
        activity_id: Activity ID
        date: Date (yyyy-MM-dd)
        hours: Number of hours
        comment: Optional comment
    """
    return await run_tool(
        "update_timesheet_entry",
        id=id,
        version=version,
        employee_id=employee_id,
        project_id=project_id,
        activity_id=activity_id,
        date=date,
        hours=hours,
        comment=comment,
    )


@mcp.tool(annotations=DESTRUCTIVE)
async def delete_timesheet_entry(id: int, version: int | None = None) -> dict:
    """
    Delete a timesheet entry.

    Args:
        id: Timesheet entry ID
        version: Version number for optimistic locking
    """
    return await run_tool("delete_timesheet_entry", id=id, version=version)


@mcp.tool(annotations=READ_ONLY)
async def get_total_hours(
    employee_id: int | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> dict:
    """
    Get total hours registered for an employee in a date range.

    Args:
        employee_id: Employee ID (defaults to token owner)
        start_date: Start date (yyyy-MM-dd, defaults to today)
        end_date: End date (yyyy-MM-dd, defaults to tomorrow)
    """
    return await run_tool(
        "get_total_hours",
        employee_id=employee_id,
        start_date=start_date,
        end_date=end_date,
    )


@mcp.tool(annotations=READ_ONLY)
async def get_recent_projects(employee_id: int | None = None) -> dict:
    """
    Get recently used projects for timesheet entries.

    Args:
        employee_id: Employee ID (defaults to token owner)
    """
    return await run_tool("get_recent_projects", employee_id=employee_id)


@mcp.tool(annotations=READ_ONLY)
async def get_recent_activities(project_id: int, employee_id: int | None = None) -> dict:
    """
    Get recently used activities for a project.

    Args:
        project_id: Project ID
        employee_id: Employee ID (defaults to token owner)
    """
    return await run_tool(
        "get_recent_activities", project_id=project_id, employee_id=employee_id
    )


# ============================================================================
# Time clock
# ============================================================================


@mcp.tool()
async def start_time_clock(
    activity_id: int,
    project_id: int | None = None,
    employee_id: int | None = None,
    date: str | None = None,
    comment: str | None = None,
) -> dict:
    """
    Start a time clock (timer) for tracking hours in real-time.

    Args:
        activity_id: Activity ID
        project_id: Project ID
        employee_id: Employee ID (defaults to token owner)
        date: Date (defaults to today)
        comment: Optional comment
    """
    return await run_tool(
        "start_time_clock",
        activity_id=activity_id,
        project_id=project_id,
        employee_id=employee_id,
        date=date,
        comment=comment,
    )


@mcp.tool()
async def stop_time_clock(id: int, comment: str | None = None) -> dict:
    """
    Stop a running time clock.

    Args:
        id: Time clock ID
        comment: Optional comment
    """
    return await run_tool("stop_time_clock", id=id, comment=comment)


@mcp.tool(annotations=READ_ONLY)
async def get_current_time_clock(employee_id: int | None = None) -> dict:
    """
    Get the currently running time clock for an employee.

    Args:
        employee_id: Employee ID (defaults to token owner)
    """
    return await run_tool("get_current_time_clock", employee_id=employee_id)
