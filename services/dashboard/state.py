"""Dashboard state: last search cache, pager and saved/applied tracking."""

from __future__ import annotations

import logging
import math
import threading
from typing import Callable

from services.jobs.models import Job

logger = logging.getLogger(__name__)

JOBS_PER_PAGE = 2

# Category filter options: label -> query sent when the search box is empty
JOB_CATEGORIES = {
    "Software & IT": "Software Engineer",
    "Marketing & Sales": "Marketing Manager",
    "Project Management": "Project Manager",
}


def profile_strength(saved_count: int, applied_count: int) -> int:
    """Profile completeness shown in the sidebar, capped at 100."""
    return min(10 + 5 * saved_count + 10 * applied_count, 100)


class DashboardState:
    """Client-side state of one dashboard session.

    ``all_jobs`` holds only the latest search and is replaced on every new
    search. The saved and applied id sets outlive searches but are never
    persisted, and the saved/applied views only show jobs that are in the
    latest search.
    """

    def __init__(
        self,
        fetch_jobs: Callable[[str], list[Job]] | None = None,
        page_size: int = JOBS_PER_PAGE,
    ):
        """Initialize empty state.

        Args:
            fetch_jobs: Callable running a search, e.g. QuickHireClient.search_jobs
            page_size: Jobs per page
        """
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got: {page_size}")
        self.fetch_jobs = fetch_jobs
        self.page_size = page_size
        self.saved_job_ids: set[str] = set()
        self.applied_job_ids: set[str] = set()
        self.all_jobs: list[Job] = []
        self.current_page = 1
        self._search_seq = 0
        self._lock = threading.Lock()

    # Searching

    def begin_search(self) -> int:
        """Reserve a sequence number for a search about to be issued."""
        with self._lock:
            self._search_seq += 1
            return self._search_seq

    def apply_search(self, seq: int, jobs: list[Job]) -> bool:
        """Install search results unless a newer search has been issued.

        Returns:
            True if the results replaced ``all_jobs``, False if they were stale
        """
        with self._lock:
            if seq != self._search_seq:
                logger.debug(f"Discarding stale search results (seq {seq}, latest {self._search_seq})")
                return False
            self.all_jobs = list(jobs)
            self.current_page = 1
            return True

    def load_search(self, query: str | None, category: str | None = None) -> list[Job]:
        """Run a search and replace the cached job list with its results.

        A blank ``query`` falls back to ``category``; if both are blank the
        server picks its default query.

        Raises:
            RuntimeError: If the state was built without a fetcher
        """
        if self.fetch_jobs is None:
            raise RuntimeError("No job fetcher configured")
        effective_query = (query or "").strip() or (category or "").strip()
        seq = self.begin_search()
        jobs = self.fetch_jobs(effective_query)
        self.apply_search(seq, jobs)
        return self.all_jobs

    # Paging

    def page(self, n: int) -> list[Job]:
        """Jobs on page ``n`` (1-based). Out-of-range pages are empty."""
        if n < 1:
            return []
        start = (n - 1) * self.page_size
        return self.all_jobs[start : start + self.page_size]

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.all_jobs) / self.page_size)

    def current(self) -> list[Job]:
        return self.page(self.current_page)

    def next_page(self) -> list[Job]:
        if self.current_page < self.total_pages:
            self.current_page += 1
        return self.current()

    def previous_page(self) -> list[Job]:
        if self.current_page > 1:
            self.current_page -= 1
        return self.current()

    # Saved / applied

    def toggle_saved(self, job_id: str) -> bool:
        """Flip the saved flag of a job.

        Returns:
            True if the job is saved after the call
        """
        if job_id in self.saved_job_ids:
            self.saved_job_ids.discard(job_id)
            return False
        self.saved_job_ids.add(job_id)
        return True

    def mark_applied(self, job_id: str) -> None:
        """Record an application. There is no way back."""
        self.saved_job_ids.discard(job_id)
        self.applied_job_ids.add(job_id)

    def is_saved(self, job_id: str) -> bool:
        return job_id in self.saved_job_ids

    def is_applied(self, job_id: str) -> bool:
        return job_id in self.applied_job_ids

    @property
    def profile_strength(self) -> int:
        return profile_strength(len(self.saved_job_ids), len(self.applied_job_ids))

    def saved_jobs(self) -> list[Job]:
        return [job for job in self.all_jobs if job.id in self.saved_job_ids]

    def applied_jobs(self) -> list[Job]:
        return [job for job in self.all_jobs if job.id in self.applied_job_ids]

    def find_job(self, job_id: str) -> Job | None:
        return next((job for job in self.all_jobs if job.id == job_id), None)

    def stats(self) -> dict[str, int]:
        """Counters shown on the dashboard stat cards."""
        return {
            "jobs_applied": len(self.applied_job_ids),
            "saved_jobs": len(self.saved_job_ids),
            "recommendations": len(self.all_jobs),
            "profile_strength": self.profile_strength,
        }
