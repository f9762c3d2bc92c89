"""
MCP Tools Package

Contains all MCP tool implementations organized by category:
- projects.py: Account, project and activity lookup (3 tools)
- timesheet.py: Timesheet entries and time clock (11 tools)
- periods.py: Timesheet week and month workflow (8 tools)
- invoices.py: Outgoing and supplier invoices (9 tools)

endpoints.py holds the request table the tools are mapped through.
"""

from . import invoices, periods, projects, timesheet

__all__ = ["invoices", "periods", "projects", "timesheet"]
