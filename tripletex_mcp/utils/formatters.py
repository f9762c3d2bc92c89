"""
Response Formatting

Utilities for formatting tool responses.

Successful calls return the Tripletex JSON unchanged; these helpers only shape
errors and the few plain-message results.
"""

from datetime import datetime


def format_message_response(message: str) -> dict:
    """
    Format a tool result that has no upstream payload (e.g. after DELETE).

    Args:
        message: Human readable outcome

    Returns:
        Formatted response dict
    """
    return {"success": True, "message": message}


def format_error_response(error: Exception, context: dict | None = None) -> dict:
    """
    Format error response for MCP tools.

    Args:
        error: Exception that occurred
        context: Optional context (tool name, parameters, etc.)

    Returns:
        Formatted error dict
    """
    # Handle custom error types with to_dict() method
    if hasattr(error, "to_dict"):
        response = error.to_dict()
    else:
        response = {
            "success": False,
            "error": type(error).__name__,
            "message": str(error),
        }

    response["timestamp"] = datetime.now().isoformat()

    if context:
        response["context"] = context

    return response
