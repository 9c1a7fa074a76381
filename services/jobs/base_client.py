"""
Base API Client

Abstract base class for upstream API clients with common functionality:
- Shared HTTP session
- Bounded request timeout
- Optional retry policy (off by default)
- Response handling and logging
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """
    Abstract base class for API clients.

    Subclasses implement ``_make_request`` and ``_get_headers`` for the
    API-specific parts.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 15,
        max_retries: int = 0,
        retry_backoff_factor: float = 0.5,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the API client.

        Args:
            api_key: API key for authentication
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Retry attempts on 429/5xx responses (0 disables)
            retry_backoff_factor: Multiplier for exponential backoff
            session: Pre-built session, mainly for tests
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries

        self.session = session or requests.Session()
        if session is None and max_retries > 0:
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=retry_backoff_factor,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    @abstractmethod
    def _get_headers(self) -> Dict[str, str]:
        """Headers carrying the API credentials."""

    @abstractmethod
    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make an API request.

        Args:
            endpoint: API endpoint (relative to base_url)
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            requests.RequestException: If the request fails
        """

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Check the status and decode the JSON body.

        Raises:
            requests.RequestException: On a non-2xx status or an invalid JSON body
        """
        response.raise_for_status()

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            logger.error(f"Response text: {response.text[:500]}")
            raise requests.RequestException(f"Invalid JSON response: {e}")

    def _log_request(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        """Log API request details."""
        if params:
            safe_params = {k: v for k, v in params.items() if k not in ["api_key", "token"]}
            logger.info(f"API request: {endpoint} with params: {safe_params}")
        else:
            logger.info(f"API request: {endpoint}")

        if status_code:
            logger.debug(f"Response status: {status_code}")
