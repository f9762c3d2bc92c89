"""
MCP Server for the Tripletex API

Main entry point for the MCP server that exposes Tripletex time tracking,
timesheet and invoice operations to AI assistants via the Model Context
Protocol.

Features:
- 31 MCP tools across 4 categories
- One lazily created session token shared by all tool calls
- Upstream JSON returned unchanged, errors returned as structured dicts

Usage:
    # Standalone mode
    python -m tripletex_mcp

    # Via Claude Desktop / any MCP host: run the `tripletex-mcp` command
    # with TRIPLETEX_CONSUMER_TOKEN and TRIPLETEX_EMPLOYEE_TOKEN set.

Architecture:
    - Standalone Python process
    - Communication: stdio (MCP protocol) with the host
    - HTTP client to Tripletex (https://tripletex.no/v2)
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from .client.tripletex_client import TripletexClient
from .config import config

# Configure logging (stdout carries the MCP protocol, so logs go to stderr)
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
        *([] if not config.LOG_FILE else [logging.FileHandler(config.LOG_FILE)]),
    ],
)

logger = logging.getLogger(__name__)

# Process-wide Tripletex client; owns the session token
tripletex_client: TripletexClient | None = None


def get_tripletex_client() -> TripletexClient:
    """Get Tripletex API client (lazy initialization)."""
    global tripletex_client
    if tripletex_client is None:
        tripletex_client = TripletexClient()
        logger.info("Tripletex API client initialized")
    return tripletex_client


# ============================================================================
# Server Lifecycle Management
# ============================================================================


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict]:
    """
    Server lifecycle management.

    Handles:
    - Configuration validation on startup
    - Client cleanup on shutdown

    The session token is not created here; the first tool call does that.
    """
    global tripletex_client

    logger.info("MCP Server starting...")

    is_valid, error = config.validate()
    if not is_valid:
        logger.error(f"Invalid configuration: {error}")
        raise ValueError(f"Configuration error: {error}")

    logger.info(f"Configuration: {config.get_summary()}")

    if not config.has_credentials():
        logger.warning(
            "TRIPLETEX_CONSUMER_TOKEN / TRIPLETEX_EMPLOYEE_TOKEN not set - "
            "tool calls will fail until they are configured"
        )

    get_tripletex_client()

    logger.info("MCP Server started successfully")

    try:
        yield {}
    finally:
        logger.info("MCP Server shutting down...")
        if tripletex_client:
            tripletex_client.close()
            tripletex_client = None
        logger.info("MCP Server stopped")


# Create MCP server instance with lifespan
mcp = FastMCP(
    name="tripletex",
    lifespan=app_lifespan,
)


# ============================================================================
# Server Entry Point
# ============================================================================


def main():
    """
    Main entry point for MCP server.

    Runs the server in stdio mode for communication with the MCP host.
    """
    # Importing the tool modules registers their @mcp.tool() functions
    from . import tools  # noqa: F401

    logger.info("Starting MCP server in stdio mode...")
    mcp.run()

