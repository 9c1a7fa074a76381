"""Job search: JSearch client, Job model and the search proxy service."""

from .job_search_service import DEFAULT_SEARCH_QUERY, JobSearchService
from .jsearch_client import JSearchClient
from .models import Job, normalize_posting, normalize_search_response

__all__ = [
    "DEFAULT_SEARCH_QUERY",
    "Job",
    "JSearchClient",
    "JobSearchService",
    "normalize_posting",
    "normalize_search_response",
]
