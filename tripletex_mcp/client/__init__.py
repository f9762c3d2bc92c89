"""
HTTP Client Package

Tripletex API client for the MCP server: session token handling and the
request dispatcher every tool goes through.
"""

from .errors import (
    AuthenticationError,
    ConfigurationError,
    NoSessionError,
    ProtocolError,
    TransportError,
    TripletexError,
    UpstreamError,
)
from .session import SessionManager
from .tripletex_client import TripletexClient

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "NoSessionError",
    "ProtocolError",
    "SessionManager",
    "TransportError",
    "TripletexClient",
    "TripletexError",
    "UpstreamError",
]
