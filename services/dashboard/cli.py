"""Terminal dashboard: log in, search and page through jobs."""

from __future__ import annotations

import argparse
import getpass
import logging
import os
import sys

from services.shared.exceptions import QuickHireError

from .client import QuickHireClient
from .state import JOB_CATEGORIES, JOBS_PER_PAGE, DashboardState

logger = logging.getLogger(__name__)


def format_job_card(job, state: DashboardState) -> str:
    if state.is_applied(job.id):
        badge = "[Applied]"
    elif state.is_saved(job.id):
        badge = "[Saved]"
    else:
        badge = ""
    lines = [
        f"{job.title}  {badge}".rstrip(),
        f"  {job.employer_name} | {job.city} | {job.employment_type}",
        f"  id: {job.id}",
        f"  apply: {job.apply_link}",
    ]
    return "\n".join(lines)


def render_page(state: DashboardState) -> str:
    jobs = state.current()
    if not jobs:
        return "No jobs found for this query."
    cards = "\n\n".join(format_job_card(job, state) for job in jobs)
    stats = state.stats()
    footer = (
        f"Page {state.current_page} of {state.total_pages} | "
        f"applied {stats['jobs_applied']} | saved {stats['saved_jobs']} | "
        f"recommendations {stats['recommendations']} | "
        f"profile {stats['profile_strength']}% complete"
    )
    return f"{cards}\n\n{footer}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search jobs from the terminal")
    parser.add_argument(
        "--base-url",
        default=os.getenv("QUICKHIRE_URL", "http://localhost:5000"),
        help="Server root URL",
    )
    parser.add_argument("--email", required=True, help="Account email")
    parser.add_argument(
        "--password",
        default=os.getenv("QUICKHIRE_PASSWORD"),
        help="Account password (prompted for when omitted)",
    )
    parser.add_argument("--query", default="", help="Search query")
    parser.add_argument(
        "--category",
        choices=sorted(JOB_CATEGORIES.values()),
        help="Category searched when --query is empty",
    )
    parser.add_argument("--page", type=int, default=1, help="Page to show")
    parser.add_argument("--page-size", type=int, default=JOBS_PER_PAGE, help="Jobs per page")
    parser.add_argument("--save", action="append", default=[], metavar="JOB_ID", help="Toggle saved")
    parser.add_argument(
        "--applied", action="append", default=[], metavar="JOB_ID", help="Mark as applied"
    )
    return parser


def main(argv: list[str] | None = None, client: QuickHireClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    client = client or QuickHireClient(args.base_url)
    password = args.password or getpass.getpass("Password: ")

    try:
        client.login(args.email, password)
        state = DashboardState(fetch_jobs=client.search_jobs, page_size=args.page_size)
        state.load_search(args.query, category=args.category)
    except QuickHireError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    for job_id in args.save:
        state.toggle_saved(job_id)
    for job_id in args.applied:
        state.mark_applied(job_id)

    state.current_page = max(1, min(args.page, max(state.total_pages, 1)))
    print(render_page(state))
    client.logout()
    return 0


if __name__ == "__main__":
    sys.exit(main())
