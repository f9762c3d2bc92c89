"""
MCP Server Configuration

Centralized configuration for the Tripletex MCP server including:
- Tripletex credentials (consumer token, employee token, company ID)
- Tripletex API connection settings
- Logging configuration

Values are read from the environment once at import time. A ``.env`` file in
the working directory is loaded first so local development needs no exports.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _mask(secret: str | None) -> str | None:
    """Mask a secret for logging, keeping only the last 4 characters."""
    if not secret:
        return None
    return f"***{secret[-4:]}" if len(secret) > 8 else "***"


class TripletexServerConfig:
    """Configuration for Tripletex MCP server operations."""

    # ============================================================================
    # Credentials
    # ============================================================================

    # Long-lived application token issued by Tripletex
    CONSUMER_TOKEN: str | None = os.getenv("TRIPLETEX_CONSUMER_TOKEN") or None

    # Long-lived employee token for the user the server acts as
    EMPLOYEE_TOKEN: str | None = os.getenv("TRIPLETEX_EMPLOYEE_TOKEN") or None

    # Company (account) to act on; "0" means the token owner's own company
    COMPANY_ID: str = os.getenv("TRIPLETEX_COMPANY_ID") or "0"

    # ============================================================================
    # Tripletex API Connection
    # ============================================================================

    API_URL: str = os.getenv("TRIPLETEX_API_URL") or "https://tripletex.no/v2"

    # Request timeout in seconds
    API_TIMEOUT: int = int(os.getenv("TRIPLETEX_API_TIMEOUT", "30"))

    # ============================================================================
    # Logging
    # ============================================================================

    # Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Log file path (optional - if not set, logs to stderr only)
    LOG_FILE: str | None = os.getenv("LOG_FILE", None)

    # Enable detailed API request/response logging
    LOG_API_REQUESTS: bool = os.getenv("LOG_API_REQUESTS", "false").lower() == "true"

    # ============================================================================
    # Helper Methods
    # ============================================================================

    @classmethod
    def has_credentials(cls) -> bool:
        """True when both tokens needed for a session are configured."""
        return bool(cls.CONSUMER_TOKEN and cls.EMPLOYEE_TOKEN)

    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary as dict (tokens masked)."""
        return {
            "api_url": cls.API_URL,
            "api_timeout": cls.API_TIMEOUT,
            "company_id": cls.COMPANY_ID,
            "consumer_token": _mask(cls.CONSUMER_TOKEN),
            "employee_token": _mask(cls.EMPLOYEE_TOKEN),
            "logging": {
                "level": cls.LOG_LEVEL,
                "file": cls.LOG_FILE,
                "api_requests": cls.LOG_API_REQUESTS,
            },
        }

    @classmethod
    def validate(cls) -> tuple[bool, str | None]:
        """
        Validate configuration settings.

        Missing tokens are not reported here: they surface as a
        ConfigurationError on the first tool call that needs a session.

        Returns:
            (is_valid, error_message)
        """
        if not cls.API_URL:
            return False, "TRIPLETEX_API_URL is required"

        if not cls.API_URL.startswith(("http://", "https://")):
            return False, "TRIPLETEX_API_URL must start with http:// or https://"

        if cls.API_TIMEOUT <= 0:
            return False, "TRIPLETEX_API_TIMEOUT must be positive"

        if not cls.COMPANY_ID.isdigit():
            return False, "TRIPLETEX_COMPANY_ID must be a non-negative integer"

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if cls.LOG_LEVEL not in valid_log_levels:
            return False, f"LOG_LEVEL must be one of: {valid_log_levels}"

        return True, None


# Singleton instance
config = TripletexServerConfig()
