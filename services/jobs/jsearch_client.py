"""
JSearch API Client

Client for the JSearch job-search API on RapidAPI.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

import requests

from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsearch.p.rapidapi.com"


class JSearchClient(BaseAPIClient):
    """
    Client for JSearch API.

    Handles authentication headers and the search call. Errors are raised as
    ``requests.RequestException``; mapping them to application errors is the
    caller's job.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15,
        max_retries: int = 0,
        session: requests.Session | None = None,
    ):
        """
        Initialize JSearch API client.

        Args:
            api_key: RapidAPI key for JSearch
            base_url: API root, overridable for proxies and tests
            timeout: Request timeout in seconds
            max_retries: Retry attempts on 429/5xx responses (0 disables)
            session: Pre-built session, mainly for tests
        """
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            session=session,
        )

    def _get_headers(self) -> dict[str, str]:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": urlparse(self.base_url).netloc,
        }

    def _make_request(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """
        Make a GET request to the JSearch API.

        Args:
            endpoint: API endpoint (e.g., "/search")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            requests.RequestException: If the request fails
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.get(
                url, headers=self._get_headers(), params=params, timeout=self.timeout
            )
            self._log_request(endpoint, params, response.status_code)
            return self._handle_response(response)

        except requests.RequestException as e:
            logger.error(f"JSearch API request failed: {e}")
            if getattr(e, "response", None) is not None:
                logger.error(f"Response status: {e.response.status_code}")
                logger.error(f"Response text: {e.response.text[:500]}")
            raise

    def search_jobs(self, query: str, page: int = 1, num_pages: int = 1, **kwargs) -> Any:
        """
        Search for jobs using JSearch API.

        Args:
            query: Job search query (e.g., "developer jobs in chicago")
            page: Page number (default: 1)
            num_pages: Number of pages to fetch (default: 1)
            **kwargs: Additional query parameters

        Returns:
            API response with job postings data
        """
        params = {
            "query": query,
            "page": str(page),
            "num_pages": str(num_pages),
        }
        params.update(kwargs)

        return self._make_request("/search", params=params)
