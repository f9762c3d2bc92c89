"""
Tripletex Session Management

Tripletex authenticates business calls with a session token that is created by
exchanging the long-lived consumer and employee tokens. The token is valid until
the expiration date sent with the exchange (one day ahead). It lives in memory
only and is shared by every tool call in the process.

Concurrent callers that find no usable token all await the same in-flight
creation, so at most one exchange is made per token.
"""

import asyncio
import base64
import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

import requests
from requests.auth import AuthBase

from .errors import (
    AuthenticationError,
    ConfigurationError,
    NoSessionError,
    ProtocolError,
    TransportError,
)

logger = logging.getLogger(__name__)

SESSION_CREATE_PATH = "/token/session/:create"
SESSION_LIFETIME = timedelta(days=1)


def utc_today() -> date:
    """Current calendar date in UTC, the date Tripletex expiration dates use."""
    return datetime.now(timezone.utc).date()


class SessionManager(AuthBase):
    """
    Owns the single Tripletex session token for one configured account.

    States are unset and active. A token becomes stale once the calendar date
    reaches its expiration date, after which the next ensure_session() creates
    a fresh one.
    """

    def __init__(
        self,
        http: requests.Session,
        base_url: str,
        consumer_token: str | None,
        employee_token: str | None,
        company_id: str = "0",
        timeout: int | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self._http = http
        self.base_url = base_url.rstrip("/")
        self._consumer_token = consumer_token
        self._employee_token = employee_token
        self.company_id = company_id
        self.timeout = timeout
        self._today = today

        self._token: str | None = None
        self._expires_on: date | None = None
        self._pending: asyncio.Future | None = None

    @property
    def has_session(self) -> bool:
        return self._token is not None and not self._is_stale()

    @property
    def expires_on(self) -> date | None:
        return self._expires_on

    def _is_stale(self) -> bool:
        return self._expires_on is not None and self._today() >= self._expires_on

    async def ensure_session(self) -> None:
        """
        Make sure a usable session token is cached.

        Raises:
            ConfigurationError: consumer or employee token not configured
            AuthenticationError: Tripletex rejected the token exchange
        """
        if self.has_session:
            return

        if not self._consumer_token or not self._employee_token:
            raise ConfigurationError(
                "TRIPLETEX_CONSUMER_TOKEN and TRIPLETEX_EMPLOYEE_TOKEN env vars are required."
            )

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._create_session())
            self._pending.add_done_callback(self._creation_done)

        await asyncio.shield(self._pending)

    def _creation_done(self, future: asyncio.Future) -> None:
        # Runs even when every waiter was cancelled, so a failed exchange
        # never stays memoized and the next call tries again
        if self._pending is future:
            self._pending = None
        if future.cancelled() or future.exception() is not None:
            return
        self._token, self._expires_on = future.result()

    async def _create_session(self) -> tuple[str, date]:
        expiration = self._today() + SESSION_LIFETIME
        url = f"{self.base_url}{SESSION_CREATE_PATH}"
        payload = {
            "consumerToken": self._consumer_token,
            "employeeToken": self._employee_token,
            "expirationDate": expiration.isoformat(),
        }

        logger.info(f"Creating Tripletex session token (expires {expiration})")

        try:
            response = await asyncio.to_thread(
                self._http.post, url, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Connection error: {e}") from e

        if not response.ok:
            logger.error(f"Session token exchange failed: {response.status_code}")
            raise AuthenticationError(response.status_code, response.text)

        try:
            token = response.json()["value"]["token"]
        except (ValueError, KeyError, TypeError) as e:
            raise ProtocolError(
                f"Unexpected session response: {response.text[:200]}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        logger.info("Tripletex session token created")
        return token, expiration

    def build_auth_header(self) -> dict[str, str]:
        """
        Basic auth header for business calls.

        Raises:
            NoSessionError: ensure_session() has not succeeded yet
        """
        if self._token is None:
            raise NoSessionError()

        credential = f"{self.company_id}:{self._token}".encode()
        encoded = base64.b64encode(credential).decode("ascii")
        return {"Authorization": f"Basic {encoded}"}

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers.update(self.build_auth_header())
        return request

    def reset(self) -> None:
        """Forget the cached token."""
        self._token = None
        self._expires_on = None
