"""
Tripletex client errors.

Every failure the client can report derives from TripletexError, which knows
how to render itself as the structured error dict returned by MCP tools.
"""


class TripletexError(Exception):
    """Base exception for the Tripletex client."""

    error_type = "tripletex_error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert error to dict for MCP error responses."""
        result = {"success": False, "error": self.error_type, "message": self.message}

        if self.status_code is not None:
            result["status_code"] = self.status_code

        if self.body is not None:
            result["body"] = self.body

        return result


class ConfigurationError(TripletexError):
    """Consumer or employee token missing from configuration."""

    error_type = "configuration_error"


class AuthenticationError(TripletexError):
    """Tripletex rejected the session token exchange."""

    error_type = "authentication_error"

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Failed to create session token: {status_code} {body}",
            status_code=status_code,
            body=body,
        )


class NoSessionError(TripletexError):
    """Auth header requested before a session was established."""

    error_type = "no_session"

    def __init__(self, message: str = "No session token available."):
        super().__init__(message)


class UpstreamError(TripletexError):
    """A business call returned a non-success status."""

    error_type = "api_error"

    def __init__(self, status_code: int, body: str, path: str | None = None):
        self.path = path
        super().__init__(
            f"Tripletex API {status_code}: {body}",
            status_code=status_code,
            body=body,
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.path:
            result["endpoint"] = self.path
        return result


class ProtocolError(TripletexError):
    """A successful response whose body could not be parsed."""

    error_type = "protocol_error"


class TransportError(TripletexError):
    """The request never produced an HTTP response (timeout, refused, DNS)."""

    error_type = "connection_error"
