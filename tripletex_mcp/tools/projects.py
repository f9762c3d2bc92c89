"""
Account, Project & Activity Tools

Provides 3 lookup MCP tools:
1. whoami - Who the session token belongs to
2. search_projects - Find project IDs for logging hours
3. search_activities - Find activity IDs for logging hours
"""

from ..server import mcp
from .base import READ_ONLY, run_tool


@mcp.tool(annotations=READ_ONLY)
async def whoami() -> dict:
    """
    Get information about the currently authenticated user.

    Returns:
        Employee and company the session acts as
    """
    return await run_tool("whoami")


@mcp.tool(annotations=READ_ONLY)
async def search_projects(
    name: str | None = None,
    number: str | None = None,
    employee_in_project_id: str | None = None,
    project_manager_id: str | None = None,
    is_closed: bool | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Search for projects by name or other filters.

    Use this to find project IDs for logging hours.

    Args:
        name: Search by project name (partial match)
        number: Search by project number (exact match)
        employee_in_project_id: Filter by employee ID(s) assigned to project
        project_manager_id: Filter by project manager ID(s)
        is_closed: Filter by closed status
        offset: Pagination offset
        count: Number of results

    Example:
        search_projects(name="Acme")
    """
    return await run_tool(
        "search_projects",
        name=name,
        number=number,
        employee_in_project_id=employee_in_project_id,
        project_manager_id=project_manager_id,
        is_closed=is_closed,
        offset=offset,
        count=count,
    )


@mcp.tool(annotations=READ_ONLY)
async def search_activities(
    name: str | None = None,
    number: str | None = None,
    is_project_activity: bool | None = None,
    is_general: bool | None = None,
    is_inactive: bool | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Search for activities (e.g. development, meetings, vacation).

    Use this to find activity IDs for logging hours.

    Args:
        name: Search by activity name (partial match)
        number: Search by activity number (exact match)
        is_project_activity: Filter to project activities only
        is_general: Filter to general activities only
        is_inactive: Filter by inactive status (default: show active)
        offset: Pagination offset
        count: Number of results
    """
    return await run_tool(
        "search_activities",
        name=name,
        number=number,
        is_project_activity=is_project_activity,
        is_general=is_general,
        is_inactive=is_inactive,
        offset=offset,
        count=count,
    )
