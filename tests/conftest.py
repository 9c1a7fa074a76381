"""
Root pytest configuration and shared fixtures.

This file contains configuration and fixtures shared across all test types.
Directory-specific conftest.py files can override or extend these fixtures.
"""

import sys
from pathlib import Path

import pytest

# Make "backend" and "services" importable without an editable install
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from services.auth import PasswordHasher  # noqa: E402
from services.jobs.models import Job  # noqa: E402
from services.shared import SQLiteDatabase  # noqa: E402


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fast_hasher():
    """Scrypt hasher with a low cost factor so tests stay quick."""
    return PasswordHasher(n=2**10)


@pytest.fixture
def sqlite_database(tmp_path):
    """SQLite database in a temporary file."""
    return SQLiteDatabase(path=str(tmp_path / "quickhire_test.db"))


@pytest.fixture
def sample_jobs():
    """Five normalized jobs, ids job-0 .. job-4."""
    return [
        Job(id=f"job-{i}", title=f"Engineer {i}", employer_name=f"Company {i}")
        for i in range(5)
    ]


@pytest.fixture
def sample_jsearch_payload():
    """A trimmed JSearch /search response."""
    return {
        "status": "OK",
        "request_id": "req-1",
        "data": [
            {
                "job_id": "abc123",
                "job_title": "Project Manager",
                "employer_name": "Acme Corp",
                "employer_logo": "https://logo.example.com/acme.png",
                "job_city": "Chicago",
                "job_employment_type": "FULLTIME",
                "job_apply_link": "https://acme.example.com/apply",
                "job_description": "Manage projects.",
                "job_highlights": {
                    "Qualifications": ["5 years experience", "PMP"],
                    "Responsibilities": ["Run standups"],
                },
            },
            {
                "job_id": "def456",
                "job_title": "Junior Project Manager",
            },
        ],
    }
