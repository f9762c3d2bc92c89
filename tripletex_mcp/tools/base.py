"""
Shared tool runner.

Each tool function only declares its typed parameters and docstring; run_tool
looks up the endpoint record, performs the request and turns failures into
the structured error dicts MCP hosts receive.
"""

import logging
from typing import Any

from mcp.types import ToolAnnotations

from ..client.errors import TripletexError
from ..server import get_tripletex_client
from ..utils.formatters import format_error_response
from ..utils.validators import ValidationError
from .endpoints import ENDPOINTS, call_endpoint

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True)
DESTRUCTIVE = ToolAnnotations(destructiveHint=True)


async def run_tool(tool_name: str, /, **args: Any) -> Any:
    """
    Run the endpoint registered under the tool's name.

    Args:
        tool_name: Tool name (key in ENDPOINTS), positional only so a
            tool argument called "name" passes through **args
        **args: Tool arguments by their Python names

    Returns:
        Tripletex JSON unchanged, or an error dict
    """
    endpoint = ENDPOINTS[tool_name]
    set_args = {key: value for key, value in args.items() if value is not None}
    logger.info(f"{tool_name} called with: {set_args}")

    try:
        client = get_tripletex_client()
        return await call_endpoint(client, endpoint, args)

    except ValidationError as e:
        logger.error(f"Validation error in {tool_name}: {e}")
        return format_error_response(e)
    except TripletexError as e:
        logger.error(f"Tripletex error in {tool_name}: {e}")
        return format_error_response(e, {"tool": tool_name})
    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}: {e}")
        return format_error_response(e, {"tool": tool_name})
