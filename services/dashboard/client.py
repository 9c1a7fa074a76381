"""HTTP client for the QuickHire server, holding the session cookie."""

from __future__ import annotations

import logging
from typing import Any

import requests

from services.jobs.models import Job
from services.shared.exceptions import (
    DuplicateUserError,
    InternalError,
    InvalidCredentialsError,
    MisconfiguredError,
    QuickHireError,
    UnauthorizedError,
    UpstreamUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class QuickHireClient:
    """Client for the QuickHire JSON API.

    Cookies set by ``login`` are kept on the underlying ``requests.Session``
    and sent with every later call.
    """

    def __init__(self, base_url: str, timeout: float = 30, session: requests.Session | None = None):
        """Initialize the client.

        Args:
            base_url: Server root (e.g., "http://localhost:5000")
            timeout: Request timeout in seconds
            session: Pre-built session, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def register(self, email: str, password: str) -> dict[str, Any]:
        return self._request("POST", "/register", json={"email": email, "password": password})

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/login", json={"email": email, "password": password})
        logger.info(f"Logged in as {email}")
        return data

    def logout(self) -> None:
        """End the server session and drop the local cookie."""
        try:
            self.session.get(
                f"{self.base_url}/logout", timeout=self.timeout, allow_redirects=False
            )
        except requests.RequestException as e:
            logger.warning(f"Logout request failed: {e}")
        self.session.cookies.clear()

    def me(self) -> str:
        """Email of the logged-in user."""
        return self._request("GET", "/api/me")["email"]

    def search_jobs(self, query: str) -> list[Job]:
        data = self._request("GET", "/api/jobs", params={"query": query})
        return [Job.from_dict(item) for item in data.get("data") or []]

    def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                timeout=self.timeout,
                allow_redirects=False,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"Request to {path} failed: {e}")
            raise UpstreamUnavailableError(f"Could not reach server: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.ok:
            return data
        raise _error_for(response.status_code, data.get("message"))


def _error_for(status_code: int, message: str | None) -> QuickHireError:
    """Map an error response back onto the exception taxonomy."""
    if status_code == 400:
        return ValidationError(message)
    if status_code == 409:
        return DuplicateUserError(message)
    if status_code == 401:
        if message == InvalidCredentialsError.default_message:
            return InvalidCredentialsError(message)
        return UnauthorizedError(message)
    if status_code in (502, 503, 504):
        return UpstreamUnavailableError(message)
    if status_code == 500 and message == MisconfiguredError.default_message:
        return MisconfiguredError(message)
    return InternalError(message or f"Server error: {status_code}")
