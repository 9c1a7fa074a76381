"""Dashboard client: state cache, pager and the HTTP client behind it."""

from .client import QuickHireClient
from .state import JOB_CATEGORIES, JOBS_PER_PAGE, DashboardState, profile_strength

__all__ = [
    "DashboardState",
    "JOB_CATEGORIES",
    "JOBS_PER_PAGE",
    "QuickHireClient",
    "profile_strength",
]
