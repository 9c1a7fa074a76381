"""Job search proxy: forwards searches to JSearch and normalizes the results."""

from __future__ import annotations

import logging

import requests

from services.shared.exceptions import (
    MisconfiguredError,
    UnauthorizedError,
    UpstreamUnavailableError,
)
from services.shared.structured_logging import get_structured_logger

from .jsearch_client import JSearchClient
from .models import Job, normalize_search_response

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_QUERY = "Project Manager"


class JobSearchService:
    """Run job searches on behalf of a logged-in user.

    Results are not cached; every call queries upstream.
    """

    def __init__(
        self,
        jsearch_client: JSearchClient | None,
        default_query: str = DEFAULT_SEARCH_QUERY,
        num_pages: int = 1,
    ):
        """Initialize the job search service.

        Args:
            jsearch_client: JSearch client, or None when no API key is configured
            default_query: Query used when the caller sends a blank one
            num_pages: Number of upstream pages to request per search
        """
        if not isinstance(num_pages, int) or num_pages <= 0:
            raise ValueError(f"num_pages must be a positive integer, got: {num_pages}")
        self.client = jsearch_client
        self.default_query = default_query
        self.num_pages = num_pages

    def search(self, query: str | None, requester: str | None) -> list[Job]:
        """Search jobs for an authenticated requester.

        Args:
            query: Free-text search; blank falls back to the default query
            requester: Email of the session owner

        Returns:
            Normalized job list, in upstream order

        Raises:
            UnauthorizedError: If there is no requester
            MisconfiguredError: If no JSearch API key is configured
            UpstreamUnavailableError: If JSearch fails, times out or returns a non-2xx status
        """
        if not requester:
            raise UnauthorizedError()
        if self.client is None or not self.client.api_key:
            logger.error("JSearch API key is not configured")
            raise MisconfiguredError()

        effective_query = (query or "").strip() or self.default_query
        log = get_structured_logger(__name__, user=requester, query=effective_query)

        try:
            payload = self.client.search_jobs(effective_query, page=1, num_pages=self.num_pages)
        except requests.Timeout as e:
            log.warning(f"JSearch timed out after {self.client.timeout}s")
            raise UpstreamUnavailableError("Job search timed out. Please try again.") from e
        except requests.RequestException as e:
            log.warning(f"JSearch request failed: {e}")
            raise UpstreamUnavailableError() from e

        jobs = normalize_search_response(payload)
        log.info(f"Returned {len(jobs)} jobs")
        return jobs
