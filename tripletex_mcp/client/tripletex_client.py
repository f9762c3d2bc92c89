"""
Tripletex API HTTP Client

Provides the single request dispatcher every MCP tool goes through.

Features:
- GET, POST, PUT, DELETE methods
- Lazy session token creation (see session.py)
- Query filtering (unset and empty values are never sent)
- Tripletex ":action" and ">subResource" paths (">" goes out as %3E)
- Detailed error reporting with the upstream status and body
- Request/response logging (optional)
- Session management for connection pooling
"""

import asyncio
import json
import logging
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import requests

from ..config import config
from .errors import ProtocolError, TransportError, UpstreamError
from .session import SessionManager

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


def format_query_value(value: Any) -> str:
    """Render a scalar the way Tripletex expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_string(query: Mapping[str, Any] | None) -> str:
    """
    Encode query parameters, skipping None and empty-string values.

    Example:
        >>> build_query_string({"name": "Acme", "count": 10, "comment": "", "id": None})
        'name=Acme&count=10'
    """
    if not query:
        return ""
    pairs = [
        (key, format_query_value(value))
        for key, value in query.items()
        if value is not None and value != ""
    ]
    return urlencode(pairs)


class TripletexClient:
    """
    HTTP client for Tripletex API communication.

    Handles:
    - Session token lifecycle (through SessionManager)
    - GET, POST, PUT, DELETE requests
    - Error normalization into TripletexError subclasses
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        consumer_token: str | None = None,
        employee_token: str | None = None,
        company_id: str | None = None,
    ):
        """
        Initialize Tripletex API client.

        Args:
            base_url: Base URL for Tripletex API (defaults to config.API_URL)
            timeout: Request timeout in seconds (defaults to config.API_TIMEOUT)
            consumer_token: Consumer token (defaults to config.CONSUMER_TOKEN)
            employee_token: Employee token (defaults to config.EMPLOYEE_TOKEN)
            company_id: Company to act on (defaults to config.COMPANY_ID)
        """
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.timeout = timeout or config.API_TIMEOUT
        self.session = requests.Session()

        # Configure session
        self.session.headers.update(
            {"Content-Type": "application/json", "User-Agent": "tripletex-mcp/1.0"}
        )

        self.auth = SessionManager(
            self.session,
            self.base_url,
            consumer_token=consumer_token or config.CONSUMER_TOKEN,
            employee_token=employee_token or config.EMPLOYEE_TOKEN,
            company_id=company_id or config.COMPANY_ID,
            timeout=self.timeout,
        )

        logger.info(f"TripletexClient initialized: {self.base_url}")

    def _log_request(self, method: str, url: str, body: Any = None):
        """Log API request (if enabled)."""
        if config.LOG_API_REQUESTS:
            logger.debug(f"API Request: {method} {url}")
            if body is not None:
                logger.debug(f"  JSON: {body}")

    def _log_response(
        self, method: str, path: str, status_code: int, response_time: float
    ):
        """Log API response (if enabled)."""
        if config.LOG_API_REQUESTS:
            logger.debug(
                f"API Response: {method} {path} - {status_code} ({response_time:.2f}s)"
            )

    def _send(self, method: str, url: str, body: Any = None) -> requests.Response:
        return self.session.request(
            method,
            url,
            data=json.dumps(body) if body is not None else None,
            auth=self.auth,
            timeout=self.timeout,
        )

    async def execute(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """
        Perform one authenticated request against Tripletex.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL (e.g. '/timesheet/entry/>totalHours')
            query: Query parameters; None and '' values are dropped
            body: JSON-serializable request body

        Returns:
            Parsed JSON response, or {} when the response body is empty

        Raises:
            ConfigurationError, AuthenticationError: session could not be created
            UpstreamError: Tripletex returned a non-success status
            ProtocolError: success status with a body that is not JSON
            TransportError: no HTTP response was received
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        await self.auth.ensure_session()

        # Pre-encoded so booleans go out as true/false rather than True/False
        query_string = build_query_string(query)
        url = f"{self.base_url}{path}"
        if query_string:
            url = f"{url}?{query_string}"
        self._log_request(method, url, body)

        start_time = time.time()
        try:
            response = await asyncio.to_thread(self._send, method, url, body)
        except requests.RequestException as e:
            logger.error(f"Request to {path} failed: {type(e).__name__}")
            raise TransportError(f"Connection error: {e}") from e

        self._log_response(method, path, response.status_code, time.time() - start_time)

        text = response.text
        if not response.ok:
            raise UpstreamError(response.status_code, text, path=path)

        if not text:
            return {}

        try:
            return json.loads(text)
        except ValueError as e:
            raise ProtocolError(
                f"Invalid JSON from Tripletex {method} {path}: {text[:200]}",
                status_code=response.status_code,
                body=text,
            ) from e

    def close(self):
        """Close the session and cleanup resources."""
        self.session.close()
        self.auth.reset()
        logger.info("TripletexClient session closed")
