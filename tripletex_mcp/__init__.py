"""
MCP Server for the Tripletex accounting API

Provides a Model Context Protocol (MCP) server that lets AI assistants log and
review hours, run time clocks, approve timesheet weeks and months, and search
and approve invoices in Tripletex.

Key Features:
- Projects and activities lookup
- Timesheet entries (search, create, update, delete, totals)
- Time clock start/stop
- Timesheet week and month approval workflow
- Outgoing and supplier invoices, including supplier invoice approval

Architecture:
- Standalone Python process
- Communication: stdio (MCP protocol) with the MCP host
- HTTP client to the Tripletex REST API, authenticated with a session token
"""

__version__ = "1.0.0"
